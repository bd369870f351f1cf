import pytest

from liliumtools.errors import ErrorKind, ToolError, kind_from_sys_error


@pytest.mark.parametrize(
    "kind, text",
    [
        (ErrorKind.NOT_FOUND, "Not Found"),
        (ErrorKind.ADDR_IN_USE, "Address in Use"),
        (ErrorKind.WRITE_ZERO, "Write returned 0"),
        (ErrorKind.DEADLOCK, "Deadlock (Avoided)"),
        (ErrorKind.UNCATEGORIZED, "(Uncategorized)"),
        (ErrorKind.OTHER, "Other Error"),
    ],
)
def test_kind_display(kind, text):
    assert str(kind) == text


def test_display_strings_are_unique():
    texts = [str(ToolError(k)) for k in ErrorKind]
    assert len(texts) == len(set(texts))
    assert "Invalid Object State" in texts


@pytest.mark.parametrize(
    "name, kind",
    [
        ("Permission", ErrorKind.PERMISSION_DENIED),
        ("DoesNotExist", ErrorKind.NOT_FOUND),
        ("InterpError", ErrorKind.NOT_FOUND),
        ("InsufficientLength", ErrorKind.INVALID_INPUT),
        ("Pending", ErrorKind.IN_PROGRESS),
        ("Killed", ErrorKind.UNCATEGORIZED),
        ("LinkResolutionLoop", ErrorKind.FILESYSTEM_LOOP),
    ],
)
def test_kind_from_sys_error(name, kind):
    assert kind_from_sys_error(name) is kind


def test_unknown_sys_error_is_uncategorized():
    assert kind_from_sys_error("NoSuchErrorName") is ErrorKind.UNCATEGORIZED


def test_tool_error_message_display():
    err = ToolError(ErrorKind.INVALID_INPUT, "Unknown Option -x")
    assert str(err) == "Unknown Option -x"
    assert err.kind is ErrorKind.INVALID_INPUT


def test_tool_error_without_message_shows_kind():
    err = ToolError(ErrorKind.TIMED_OUT)
    assert str(err) == "Timed Out"


def test_tool_error_built_from_sys_error_kind():
    err = ToolError(kind_from_sys_error("DoesNotExist"), "missing")
    assert err.kind is ErrorKind.NOT_FOUND
    assert str(err) == "missing"
    assert isinstance(err, Exception)