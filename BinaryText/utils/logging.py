import logging
import sys
from contextlib import contextmanager
from typing import Optional, TextIO

class BinaryTextLogger:
    def __init__(self, name: str = "BinaryText", level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        
        self.handler = handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.NOTSET)
        
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)
        
        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    @contextmanager
    def redirect(self, stream: TextIO, level: Optional[int] = None):
        """Sends records only to stream until the block exits."""
        previous_stream = self.handler.stream
        previous_level = self.logger.level
        previous_propagate = self.logger.propagate
        attached = self.handler in self.logger.handlers

        self.handler.stream = stream
        if not attached:
            self.logger.addHandler(self.handler)
        self.logger.propagate = False
        if level is not None:
            self.logger.setLevel(level)
        try:
            yield self
        finally:
            self.logger.setLevel(previous_level)
            self.logger.propagate = previous_propagate
            if not attached:
                self.logger.removeHandler(self.handler)
            self.handler.stream = previous_stream

    def is_debug(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def info(self, msg: str) -> None:
        self.logger.info(msg)
    
    def debug(self, msg: str) -> None:
        self.logger.debug(msg)
    
    def warning(self, msg: str) -> None:
        self.logger.warning(msg)
    
    def error(self, msg: str) -> None:
        self.logger.error(msg)
    
    def conversion(
        self,
        direction: str,
        groups: int,
        delimiter: str,
        width: int,
        **kwargs,
    ) -> None:
        if not self.is_debug():
            return
        msg = f"{direction} | groups: {groups} | delim: {delimiter!r} | width: {width}"
        for k, v in kwargs.items():
            msg += f" | {k}: {v}"
        self.debug(msg)


_logger: Optional[BinaryTextLogger] = None

def get_logger() -> BinaryTextLogger:
    global _logger
    if _logger is None:
        _logger = BinaryTextLogger()
    return _logger
