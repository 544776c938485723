"""Errors raised while loading and reconciling record sets."""


class ReconError(Exception):
    """Base class for reconciliation errors reported to the caller."""


class InputNotFound(ReconError):
    def __init__(self, path, reason=None):
        self.path = path
        message = f"Input file not found or unreadable: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnreadableInput(ReconError):
    """The file exists but its contents cannot be decoded or parsed."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Input file cannot be read: {path} ({reason})")


class EmptyInput(ReconError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Input file has no header row: {path}")


class MalformedRow(ReconError):
    """A data row whose column count does not match the header."""

    def __init__(self, path, line_no, expected, actual):
        self.path = path
        self.line_no = line_no
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{path}:{line_no}: expected {expected} columns, got {actual}"
        )
