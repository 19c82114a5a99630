"""Error kinds raised while building the word pool, generating codes, or displaying them.

Every error is fatal for a run. ``stage`` names the step that failed so the
CLI can report it without inspecting the exception type.
"""

from __future__ import annotations


class PromoCodeError(Exception):
    """Base class for all promocodes errors."""

    stage = "promocodes"


class InvalidArgument(PromoCodeError, ValueError):
    """Raised when a count or word-length band is not usable."""

    stage = "arguments"


class SourceUnavailable(PromoCodeError):
    """Raised when the word source cannot be opened or read to completion."""

    stage = "wordlist"


class EmptyPool(PromoCodeError):
    """Raised when no word in the source passes the filter."""

    stage = "wordlist"


class InsufficientPool(PromoCodeError):
    """Raised when the pool has fewer slots than words per code."""

    stage = "generate"


class RequestExceedsCapacity(PromoCodeError):
    """Raised when more codes are requested than the pool can combine into."""

    stage = "generate"


class GenerationStalled(PromoCodeError):
    """Raised when the draw ceiling is hit before enough distinct codes were found."""

    stage = "generate"


class DisplayFailure(PromoCodeError):
    """Raised when the display cannot initialize or run."""

    stage = "display"
