import logging
import sys
from typing import Optional

class BaseCodecLogger:
    def __init__(self, name: str = "BaseCodec", level: int = logging.WARNING):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)
        
        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def info(self, msg: str) -> None:
        self.logger.info(msg)
    
    def debug(self, msg: str) -> None:
        self.logger.debug(msg)
    
    def warning(self, msg: str) -> None:
        self.logger.warning(msg)
    
    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def derived(self, source: object, result: object) -> None:
        if result is not source:
            self.debug(f"Derived {result} from {source}")

    def rejected(self, encoding: object, error: Exception) -> None:
        self.debug(f"{encoding} cannot decode input: {error}")


_logger: Optional[BaseCodecLogger] = None

def get_logger() -> BaseCodecLogger:
    global _logger
    if _logger is None:
        _logger = BaseCodecLogger()
    return _logger
