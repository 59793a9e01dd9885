"""Error kinds raised by the time shifting core."""

from __future__ import annotations

from pathlib import Path


class SubmodError(Exception):
    """Base class for every error the core raises."""


class MalformedTimestamp(SubmodError):
    def __init__(self, text: str, expected: str) -> None:
        self.text = text
        self.expected = expected
        super().__init__(f"malformed timestamp {text!r} (expected {expected})")


class MalformedCue(SubmodError):
    """A cue block could not be parsed; ``position`` is 1-based."""

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"malformed subtitle #{position}: {reason}")


class InvalidPath(SubmodError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"invalid path {self.path!r}: {reason}")


class IOFailure(SubmodError):
    """Wraps an ``OSError`` raised while reading, renaming or writing a file."""

    def __init__(self, path: str | Path, action: str, detail: str | None = None) -> None:
        self.path = str(path)
        self.action = action
        message = f"could not {action} {self.path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
