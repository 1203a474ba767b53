"""
Exception hierarchy for BaseCodec.

Configuration problems are raised when an encoding is built; decoding
problems are raised when malformed input is consumed.
"""


class BaseCodecError(Exception):
    """Root of all BaseCodec errors."""


class ConfigurationError(BaseCodecError, ValueError):
    """Incompatible alphabet, padding, separator or case settings."""


class DecodingError(BaseCodecError, IOError):
    """
    Recoverable failure while decoding base-encoded input.

    Raised by ``decode_checked`` and by decoding streams. ``decode`` wraps it
    in a ``ValueError``.
    """


class UnrecognizedCharacterError(DecodingError):
    """A character outside the alphabet, padding and separator sets."""

    def __init__(self, character: str, message: str = None):
        self.character = character
        super().__init__(message or f"Unrecognized character: {display_char(character)}")


class InvalidLengthError(DecodingError):
    """The number of data symbols cannot come from any whole number of bytes."""

    def __init__(self, length: int, message: str = None):
        self.length = length
        super().__init__(message or f"Invalid input length {length}")


def display_char(ch: str) -> str:
    """Printable form of a character, or its hex code point when invisible."""
    if ch.isprintable() and not ch.isspace():
        return ch
    return hex(ord(ch))
