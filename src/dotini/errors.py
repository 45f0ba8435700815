from __future__ import annotations


class DotIniError(Exception):
    """Base class for dotini errors."""


class FileReadError(DotIniError):
    """Raised when an INI file cannot be read from disk."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class UnsuccessfulParseError(DotIniError):
    """Raised when the input text does not match the INI grammar.

    ``line`` and ``column`` are 1-based and ``None`` when the parser could
    not attribute the failure to a position (e.g. unexpected end of input).
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        context: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.context = context


class InternalError(DotIniError):
    """Raised when the grammar and the reducer disagree."""


class MissingCaptureError(InternalError):
    """Raised when a matched rule lacks an expected capture."""

    def __init__(self, rule: str) -> None:
        super().__init__(f"rule {rule!r} matched without its expected capture")
        self.rule = rule


class UnreachableError(InternalError):
    """Raised when the reducer meets a node the grammar never produces."""

    def __init__(self, node: object) -> None:
        super().__init__(f"unexpected node in parse tree: {node!r}")
        self.node = node
