from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field


class ParseErrorDetail(BaseModel):
    """Structured details for A1 notation parse failures."""

    text: str
    offset: int = Field(ge=0)
    expected: str
    message: str


class ParseError(ValueError):
    """A1 notation parse error with structured detail."""

    def __init__(self, detail: ParseErrorDetail) -> None:
        super().__init__(detail.message)
        self.detail = detail

    @classmethod
    def at(cls, text: str, offset: int, expected: str) -> ParseError:
        """Build a ParseError for input that did not match at ``offset``."""
        found = repr(text[offset:offset + 10]) if offset < len(text) else "end of input"
        detail = ParseErrorDetail(
            text=text,
            offset=offset,
            expected=expected,
            message=f"Expected {expected} at offset {offset} in {text!r}, found {found}.",
        )
        return cls(detail)


class DecodingFailure(ValueError):
    """JSON payload could not be decoded into a domain value."""

    def __init__(
        self,
        message: str,
        history: Sequence[str | int] = (),
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.history = tuple(history)
        self.cause = cause
        super().__init__(self._format())

    def _format(self) -> str:
        if not self.history:
            return self.message
        path = ".".join(str(part) for part in self.history)
        return f"{self.message} (at {path})"
