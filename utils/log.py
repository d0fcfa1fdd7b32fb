"""
Color-coded logging utilities for the proxy.

Provides a single logging setup shared by every module plus a few
console helpers for the startup banner. Uses colorama for cross-platform
terminal color support.
"""

import datetime
import logging
import os
import sys
from typing import Optional

from colorama import Fore, Style, init

# Initialize colorama (auto-reset after each print)
init(autoreset=True)


# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------

class C:
    """Color shortcuts for console output."""
    HEADER = Fore.CYAN + Style.BRIGHT
    OK = Fore.GREEN + Style.BRIGHT
    WARN = Fore.YELLOW + Style.BRIGHT
    ERR = Fore.RED + Style.BRIGHT
    DIM = Style.DIM
    VALUE = Fore.GREEN
    RESET = Style.RESET_ALL


LEVEL_COLORS = {
    logging.DEBUG: C.DIM,
    logging.INFO: Fore.WHITE,
    logging.WARNING: C.WARN,
    logging.ERROR: C.ERR,
    logging.CRITICAL: C.ERR,
}


def _ts() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


# ---------------------------------------------------------------------------
# Console helpers
# ---------------------------------------------------------------------------

def header(msg: str) -> None:
    """Print a bold section header."""
    print(f"\n{C.HEADER}{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}{C.RESET}\n")


def ok(msg: str) -> None:
    """Print a success message."""
    print(f"{C.OK}[{_ts()}] OK {msg}{C.RESET}")


def warn(msg: str) -> None:
    """Print a warning."""
    print(f"{C.WARN}[{_ts()}] WARN {msg}{C.RESET}")


def summary_table(title: str, rows: list[tuple[str, str]]) -> None:
    """Print a summary table with label-value pairs."""
    print(f"\n{C.HEADER}{title}{C.RESET}")
    max_label = max(len(r[0]) for r in rows) if rows else 0
    for label, value in rows:
        print(f"  {label:<{max_label}}  {C.VALUE}{value}{C.RESET}")
    print()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

class ColorFormatter(logging.Formatter):
    """Formatter that colors the level name."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = LEVEL_COLORS.get(record.levelno, "")
        return f"{color}{line}{C.RESET}" if color else line


def setup_logging(name: str = "dart_proxy", level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger once and return a named logger.

    Level comes from ``level`` or the LOG_LEVEL env var (default INFO).
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root = logging.getLogger()

    # Prevent duplicate handlers on re-import
    if not any(getattr(h, "_dart_proxy", False) for h in root.handlers):
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(ColorFormatter(
            "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        ch._dart_proxy = True
        root.addHandler(ch)

    root.setLevel(getattr(logging, level, logging.INFO))
    return logging.getLogger(name)
