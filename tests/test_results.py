from unittest.mock import patch

from postboard.results import CallResult, ErrorKind, log_failure


def test_success_result_is_ok():
    result = CallResult.success([1, 2])
    assert result.ok
    assert result.value == [1, 2]
    assert result.kind is None


def test_failure_result_carries_kind_and_error():
    err = ConnectionError("down")
    result = CallResult.failure(ErrorKind.SUBMIT, err)
    assert not result.ok
    assert result.kind is ErrorKind.SUBMIT
    assert result.error is err


def test_default_sink_logs_warning():
    result = CallResult.failure(ErrorKind.FETCH, ConnectionError("down"))
    with patch("postboard.results.logger") as mock_logger:
        log_failure(result)

    mock_logger.warning.assert_called_once_with(
        "backend_call_failed",
        kind="fetch",
        error="down",
        error_type="ConnectionError",
    )
