"""
Streaming adapters built on the same bit-packing rules as bulk encode/decode.
"""

from BaseCodec.stream.encoder import EncodingStream, SeparatingWriter
from BaseCodec.stream.decoder import DecodingStream

__all__ = [
    "EncodingStream",
    "SeparatingWriter",
    "DecodingStream",
]
