from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_env: str = Field(default="development")
    log_level: str = Field(default="info")

    # Content backend
    backend_url: str = Field(default="http://localhost:8000")
    # None disables the client-side timeout; a hung call keeps the feed loading
    backend_timeout: float | None = Field(default=None)

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


settings = Settings()
