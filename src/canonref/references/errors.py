"""Errors raised while parsing, resolving and decoding references."""

from __future__ import annotations


class ScriptureRefError(ValueError):
    """Base error for reference handling.

    ``token`` holds the offending substring of the caller's input so that
    messages can point at exactly what was rejected.
    """

    def __init__(self, message: str, token: str = ""):
        super().__init__(message)
        self.token = token


class MalformedReferenceError(ScriptureRefError):
    """Input does not match the reference grammar."""

    pass


class UnknownBookError(ScriptureRefError):
    """Grammar matched but the book token has no canonical resolution."""

    pass


class UnknownAbbreviationError(ScriptureRefError):
    """A deep-link abbreviation has no reverse mapping."""

    pass
