"""Logger protocol adapters for the standard library and the console."""

import logging
from typing import Any, Optional


def _format(msg: str, kv: dict) -> str:
    details = " ".join(f"{k}={v}" for k, v in kv.items())
    return f"{msg} {details}" if details else msg


class StdlibLogger:
    """Route structured log events to a standard library logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("punctseg")

    def info(self, msg: str, **kv: Any) -> None:
        self.logger.info(_format(msg, kv))

    def warn(self, msg: str, **kv: Any) -> None:
        self.logger.warning(_format(msg, kv))

    def error(self, msg: str, **kv: Any) -> None:
        self.logger.error(_format(msg, kv))

    def __repr__(self) -> str:
        return f"StdlibLogger(name='{self.logger.name}')"


class ConsoleLogger:
    """Simple console logger for scripts and interactive use."""

    def info(self, msg: str, **kv: Any) -> None:
        print(f"INFO: {_format(msg, kv)}")

    def warn(self, msg: str, **kv: Any) -> None:
        print(f"WARN: {_format(msg, kv)}")

    def error(self, msg: str, **kv: Any) -> None:
        print(f"ERROR: {_format(msg, kv)}")


def create_stdlib_logger(name: str = "punctseg") -> StdlibLogger:
    """Create a protocol logger backed by logging.getLogger(name)."""
    return StdlibLogger(logging.getLogger(name))
