import logging

from pulsar_agent.bpf.errors import format_error_chain, log_error


def _chain(*messages):
    """Raise and catch errors so each one is caused by the next."""
    error = None
    for message in reversed(messages):
        try:
            raise RuntimeError(message) from error
        except RuntimeError as caught:
            error = caught
    return error


def test_no_cause():
    assert format_error_chain(ValueError("boom")) == "boom"


def test_single_cause():
    err = _chain("outer", "inner")
    assert format_error_chain(err) == "outer\n\nCaused by:\n    inner"


def test_multiple_causes():
    err = _chain("outer", "middle", "inner")
    assert format_error_chain(err) == (
        "outer\n\nCaused by:\n    0: middle\n    1: inner"
    )


def test_implicit_context_is_followed():
    try:
        try:
            raise KeyError("first")
        except KeyError:
            raise RuntimeError("second")
    except RuntimeError as err:
        text = format_error_chain(err)
    assert text.startswith("second\n\nCaused by:")
    assert "first" in text


def test_suppressed_context_is_ignored():
    try:
        try:
            raise KeyError("first")
        except KeyError:
            raise RuntimeError("second") from None
    except RuntimeError as err:
        assert format_error_chain(err) == "second"


def test_log_error(caplog):
    err = _chain("outer", "inner")
    with caplog.at_level(logging.ERROR):
        log_error("loading probe", err)
    (record,) = caplog.records
    assert record.levelno == logging.ERROR
    assert record.getMessage() == f"loading probe: {format_error_chain(err)}"