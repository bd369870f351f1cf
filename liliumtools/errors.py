"""Error kinds and the error type shared by the tools."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Category of an I/O or system error, valued by its display text."""

    NOT_FOUND = "Not Found"
    PERMISSION_DENIED = "Permission Denied"
    CONNECTION_REFUSED = "Connection Refused"
    CONNECTION_RESET = "Connection Reset"
    HOST_UNREACHABLE = "Host Unreachable"
    NETWORK_UNREACHABLE = "Network Unreachable"
    CONNECTION_ABORTED = "Connection Aborted"
    NOT_CONNECTED = "Not Connected"
    ADDR_IN_USE = "Address in Use"
    ADDR_NOT_AVAILABLE = "Address Not Available"
    NETWORK_DOWN = "Network Down"
    BROKEN_PIPE = "Broken Pipe"
    ALREADY_EXISTS = "Already Exists"
    WOULD_BLOCK = "Would Block"
    NOT_A_DIRECTORY = "Not A Directory"
    IS_A_DIRECTORY = "Is A Directory"
    DIRECTORY_NOT_EMPTY = "Directory Not Empty"
    READ_ONLY_FILESYSTEM = "Read Only Filesystem"
    FILESYSTEM_LOOP = "Filesystem Loop"
    STALE_NETWORK_FILE_HANDLE = "Stale Remote Object"
    INVALID_INPUT = "Invalid Input"
    INVALID_DATA = "Invalid Data"
    TIMED_OUT = "Timed Out"
    WRITE_ZERO = "Write returned 0"
    STORAGE_FULL = "Storage Full"
    NOT_SEEKABLE = "Not Seekable"
    QUOTA_EXCEEDED = "Quota Exceeded"
    FILE_TOO_LARGE = "File Too Large"
    RESOURCE_BUSY = "Resource Busy"
    EXECUTABLE_FILE_BUSY = "Text Busy"
    DEADLOCK = "Deadlock (Avoided)"
    CROSSES_DEVICES = "Crosses Devices"
    TOO_MANY_LINKS = "Too Many (Hard) Links"
    INVALID_FILENAME = "Invalid Filename"
    ARGUMENT_LIST_TOO_LONG = "Argument List Too Long"
    INTERRUPTED = "Interrupted"
    UNSUPPORTED = "Unsupported"
    UNEXPECTED_EOF = "Unexpected EOF"
    OUT_OF_MEMORY = "Out Of Memory"
    IN_PROGRESS = "In Progress"
    INVALID_STATE = "Invalid Object State"
    OTHER = "Other Error"
    UNCATEGORIZED = "(Uncategorized)"

    def __str__(self) -> str:
        return self.value


_SYS_ERROR_KINDS: dict[str, ErrorKind] = {
    "Permission": ErrorKind.PERMISSION_DENIED,
    "InvalidHandle": ErrorKind.INVALID_INPUT,
    "InvalidMemory": ErrorKind.INVALID_INPUT,
    "Busy": ErrorKind.RESOURCE_BUSY,
    "InvalidOperation": ErrorKind.INVALID_INPUT,
    "InvalidString": ErrorKind.INVALID_DATA,
    "InsufficientLength": ErrorKind.INVALID_INPUT,
    "ResourceLimitExhausted": ErrorKind.QUOTA_EXCEEDED,
    "InvalidState": ErrorKind.INVALID_STATE,
    "InvalidOption": ErrorKind.UNSUPPORTED,
    "InsufficientMemory": ErrorKind.OUT_OF_MEMORY,
    "UnsupportedKernelFunction": ErrorKind.UNSUPPORTED,
    "KernelFunctionWouldBlock": ErrorKind.WOULD_BLOCK,
    "FinishedEnumerate": ErrorKind.UNCATEGORIZED,
    "Timeout": ErrorKind.TIMED_OUT,
    "Interrupted": ErrorKind.INTERRUPTED,
    "Killed": ErrorKind.UNCATEGORIZED,
    "Deadlocked": ErrorKind.DEADLOCK,
    "UnsupportedOperation": ErrorKind.UNSUPPORTED,
    "Pending": ErrorKind.IN_PROGRESS,
    "DoesNotExist": ErrorKind.NOT_FOUND,
    "AlreadyExists": ErrorKind.ALREADY_EXISTS,
    "UnknownDevice": ErrorKind.INVALID_DATA,
    "WouldBlock": ErrorKind.WOULD_BLOCK,
    "DeviceFull": ErrorKind.STORAGE_FULL,
    "DeviceUnavailable": ErrorKind.RESOURCE_BUSY,
    "LinkResolutionLoop": ErrorKind.FILESYSTEM_LOOP,
    "OrphanedObjects": ErrorKind.UNCATEGORIZED,
    "ClosedRemotely": ErrorKind.CONNECTION_RESET,
    "ConnectionInterrupted": ErrorKind.CONNECTION_ABORTED,
    "AddressNotAvailable": ErrorKind.ADDR_NOT_AVAILABLE,
    "Signaled": ErrorKind.UNCATEGORIZED,
    "MappingInaccessible": ErrorKind.INVALID_INPUT,
    "PrivilegeCheckFailed": ErrorKind.PERMISSION_DENIED,
    "InterpError": ErrorKind.NOT_FOUND,
}


def kind_from_sys_error(name: str) -> ErrorKind:
    """Map a system error name to its ErrorKind; unknown names are uncategorized."""
    return _SYS_ERROR_KINDS.get(name, ErrorKind.UNCATEGORIZED)


class ToolError(Exception):
    """An error carrying an ErrorKind and an optional message."""

    def __init__(self, kind: ErrorKind, message: object = None) -> None:
        super().__init__(kind, message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        if self.message is None:
            return str(self.kind)
        return str(self.message)

    def __repr__(self) -> str:
        return f"ToolError(kind={self.kind.name}, message={self.message!r})"