from BaseCodec.utils.logging import get_logger, BaseCodecLogger

__all__ = [
    "get_logger",
    "BaseCodecLogger",
]
