"""Error types raised by the identifier and payload codecs."""
from __future__ import annotations


class SuiTypesError(Exception):
    """Base class for every error raised by this package."""


class DecodeError(SuiTypesError, ValueError):
    """Input text or JSON could not be decoded into a typed value."""


class InvalidHexError(DecodeError):
    """A hex string contains a character that is not a hex digit."""


class TooLongError(DecodeError):
    """Decoded identifier is wider than its fixed length."""


class InvalidBase64Error(DecodeError):
    """A base64 string is malformed."""


class UnrecognizedShapeError(DecodeError):
    """A union payload is neither a quoted string nor a JSON object."""


class MultipleOrZeroVariantsError(DecodeError):
    """A transaction-kind record does not populate exactly one variant."""

    def __init__(self, populated: list[str]) -> None:
        self.populated = populated
        if populated:
            detail = "multiple variants populated: " + ", ".join(populated)
        else:
            detail = "no variant populated"
        super().__init__(f"Transaction kind must have exactly one variant, {detail}")


class EncodeError(SuiTypesError, ValueError):
    """A value cannot be encoded."""


class EmptyUnionError(EncodeError):
    """A union value has no arm set."""
