# logger_utils.py - for logging messages and performance metrics, timestamps etc

import os
import time
from datetime import datetime
from typing import Optional

# Directory where log files are stored (created on first write)
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "spell_suggester.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """Lightweight logger for writing messages and tracking metrics."""

    COLORS = {
        "DEBUG": "\033[90m",  # gray
        "INFO": "\033[94m",  # blue
        "WARNING": "\033[93m",  # yellow
        "ERROR": "\033[91m",  # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        use_color: bool = True,
        level: str = "INFO",
        console: bool = True,
    ):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.console = console
        self.set_level(level)

    def set_level(self, level: str) -> None:
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level: {level}")
        self.level = level

    def enabled_for(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def write(self, level: str, msg: str) -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Messages below the configured level are dropped.
        """
        if not self.enabled_for(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not self.console:
            return
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    def debug(self, msg: str) -> None:
        self.write("DEBUG", msg)

    def info(self, msg: str) -> None:
        self.write("INFO", msg)

    def warning(self, msg: str) -> None:
        self.write("WARNING", msg)

    def error(self, msg: str) -> None:
        self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts, performance stats) at INFO level.
        Example: [2026-01-01 12:45:02] INFO    | suggest latency: 0.123s
        """
        self.info(f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("load_dictionary"):
                do_some_work()
        It automatically logs how long the block took.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric."""
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")


# Engine-side logger: file only, quiet unless the level is lowered.
engine_log = Log(console=False, level="WARNING")
