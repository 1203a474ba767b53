"""
Declarative encoding configuration for BaseCodec.
"""

from dataclasses import dataclass
from typing import Optional

from BaseCodec.core.errors import ConfigurationError
from BaseCodec.encoding.base import BaseEncoding, STANDARD_ENCODINGS


@dataclass
class EncodingConfig:
    """
    Configuration of an encoding, e.g. as loaded from a settings file.

    ``build`` applies the settings through the builder calls, so invalid
    combinations fail exactly as they would in code.
    """

    base: str = "base64"
    pad_char: Optional[str] = None
    omit_padding: bool = False
    case: str = "exact"
    separator: Optional[str] = None
    separator_interval: int = 76

    def build(self) -> BaseEncoding:
        """Builds the configured encoding."""
        factory = STANDARD_ENCODINGS.get(self.base)
        if factory is None:
            raise ConfigurationError(
                f"Unknown base {self.base!r}; expected one of {sorted(STANDARD_ENCODINGS)}"
            )
        encoding = factory()

        if self.case == "upper":
            encoding = encoding.upper_case()
        elif self.case == "lower":
            encoding = encoding.lower_case()
        elif self.case == "ignore":
            encoding = encoding.ignore_case()
        elif self.case != "exact":
            raise ConfigurationError(f"Unknown case mode {self.case!r}")

        if self.omit_padding and self.pad_char is not None:
            raise ConfigurationError(
                f"Cannot both omit padding and pad with {self.pad_char!r}"
            )
        if self.omit_padding:
            encoding = encoding.omit_padding()
        elif self.pad_char is not None:
            encoding = encoding.with_pad_char(self.pad_char)

        if self.separator is not None:
            encoding = encoding.with_separator(self.separator, self.separator_interval)
        return encoding

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }
    
    @classmethod
    def from_dict(cls, d: dict) -> "EncodingConfig":
        """Creates an EncodingConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
