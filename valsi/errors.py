"""
Error types raised by the valsi pipeline.

Every failure is a LojbanParseError, so callers can catch one type and branch
on ``kind``:

- "syntax":  the text does not match the grammar (LojbanSyntaxError)
- "lexical": the grammar matched but a word is in no wordlist (InvalidWordError)
- "load":    a wordlist could not be read (WordlistLoadError)
"""

from typing import Any, Dict, Optional, Tuple

Span = Tuple[int, int]


class LojbanParseError(Exception):
    """Base class for all valsi errors."""

    kind = "error"

    def __init__(self, message: str, token: Optional[str] = None, span: Optional[Span] = None):
        super().__init__(message)
        self.message = message
        self.token = token
        self.span = span

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for JSON output."""
        return {
            "kind": self.kind,
            "message": self.message,
            "token": self.token,
            "span": list(self.span) if self.span is not None else None,
        }


class LojbanSyntaxError(LojbanParseError):
    """
    The grammar engine rejected the input.

    ``message`` is the engine's own diagnostic, unchanged. ``line`` and
    ``column`` are 1-based; ``position`` is a byte offset into the input when
    the engine reports one.
    """

    kind = "syntax"

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        position: Optional[int] = None,
        token: Optional[str] = None,
    ):
        span = (position, position + len(token.encode('utf-8'))) if position is not None and token else None
        super().__init__(message, token=token, span=span)
        self.line = line
        self.column = column
        self.position = position

    def __str__(self):
        return f"Syntax error: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({"line": self.line, "column": self.column, "position": self.position})
        return data


class InvalidWordError(LojbanParseError):
    """A grammatical word that is neither a known cmavo nor a known gismu."""

    kind = "lexical"

    def __init__(self, word: str, span: Span, expected_type: str = "lojban word"):
        self.word = word
        self.expected_type = expected_type
        super().__init__(
            f"Invalid word '{word}' found at {span}, expected a valid {expected_type}",
            token=word,
            span=span,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["expected_type"] = self.expected_type
        return data


class WordlistLoadError(LojbanParseError):
    """A wordlist file was missing, unreadable or empty."""

    kind = "load"

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not load wordlist {self.path}: {reason}")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["path"] = self.path
        return data
