"""Parse-time exceptions raised by the document store"""

from typing import Optional


class ParseError(ValueError):
    """Base class for documents that cannot be split into front matter and body."""

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[int] = None):
        self.path = path
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        msg = super().__str__()
        where = self.path or "<text>"
        if self.line is not None:
            where = f"{where}:{self.line}"
        return f"{where}: {msg}"


class MalformedFrontMatter(ParseError):
    """Opening delimiter without a matching close, or a block that is not a YAML mapping."""
