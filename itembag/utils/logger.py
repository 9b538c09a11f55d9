# itembag/utils/logger.py
import datetime
import sys
from typing import Optional, TextIO

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4 # Only fatal errors

    NAMES = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARN",
        ERROR: "ERROR",
        CRITICAL: "CRIT"
    }

    @classmethod
    def from_name(cls, name: str) -> int:
        """Maps a config string like 'warning' to its level; unknown names mean DEBUG."""
        level = getattr(cls, name.strip().upper(), None)
        return level if isinstance(level, int) else cls.DEBUG

class Logger:
    _instance = None
    _level = LogLevel.DEBUG
    _stream: Optional[TextIO] = None  # None means sys.stdout at write time

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
        return cls._instance

    @classmethod
    def set_level(cls, level):
        """Sets the minimum logging level. Accepts a LogLevel value or its name."""
        if isinstance(level, str):
            level = LogLevel.from_name(level)
        cls._level = level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def set_stream(cls, stream: Optional[TextIO]):
        """Redirects output. Pass None to go back to stdout."""
        cls._stream = stream

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        if level < cls._level:
            return
        timestamp = datetime.datetime.now().strftime("%H:%M:%S")
        level_name = LogLevel.NAMES.get(level, "LOG")
        stream = cls._stream or sys.stdout
        # Format: [TIME] [LEVEL] [Source] Message
        print(f"[{timestamp}] [{level_name:<5}] [{source}] {message}", file=stream)

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)
