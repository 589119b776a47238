"""Console logging utilities for c8dc.

Diagnostics are written to stderr by default so they never interleave with the
listing printed on stdout. The CLI logs at INFO, so only load failures show up.
Call ``get_logger(log_level="DEBUG")`` before disassembling to also see the
loader's layout decisions and the driver's line counts.
"""

import sys
from typing import Dict, Optional, TextIO

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConsoleLogger:
    """Console logger with level filtering and optional colors."""

    def __init__(
        self,
        name: str = "c8dc",
        log_level: str = "INFO",
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.name = name
        self.log_level = log_level.upper()
        if self.log_level not in LEVELS:
            raise ValueError(
                f"Unknown log level '{log_level}'. Available: {list(LEVELS)}"
            )
        self._stream = stream
        self.use_colors = (
            use_colors and hasattr(self.stream, "isatty") and self.stream.isatty()
        )

        self.colors: Dict[str, str] = (
            {
                "DEBUG": "\033[36m",
                "INFO": "\033[32m",
                "WARNING": "\033[33m",
                "ERROR": "\033[31m",
                "RESET": "\033[0m"
            }
            if self.use_colors
            else {k: "" for k in LEVELS + ("RESET",)}
        )

        self.level_order = {level: i for i, level in enumerate(LEVELS)}

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected/captured stderr is honoured.
        return self._stream if self._stream is not None else sys.stderr

    def _should_log(self, level: str) -> bool:
        """Check if message should be logged based on current log level."""
        return self.level_order.get(level.upper(), 1) >= self.level_order[self.log_level]

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with level, name and colors."""
        level_str = f"[{level:>7s}]"
        if self.use_colors:
            level_str = f"{self.colors.get(level.upper(), '')}{level_str}{self.colors['RESET']}"
        return f"{level_str}[{self.name}] {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if self._should_log(level):
            print(self._format_message(level, message), file=self.stream, flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)


_loggers: Dict[str, ConsoleLogger] = {}


def get_logger(name: str = "c8dc", **kwargs) -> ConsoleLogger:
    """Return the shared logger for ``name``.

    Passing any ``ConsoleLogger`` keyword (``log_level``, ``use_colors``,
    ``stream``) replaces the shared logger with a newly configured one, so
    later calls without arguments pick up the new settings.
    """
    if kwargs or name not in _loggers:
        _loggers[name] = ConsoleLogger(name, **kwargs)
    return _loggers[name]
