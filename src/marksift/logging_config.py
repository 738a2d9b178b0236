"""Colored logging configuration for the marksift CLI.

Log output goes to stderr; stdout is reserved for bookmark records.
"""

import logging
import sys

# Component prefix colors
PREFIX_COLORS = {
    "CLASSIFIER": "\033[94m",  # Bright Blue
    "PIPELINE": "\033[97m",    # Bright White
    "PLIST": "\033[96m",       # Bright Cyan
    "PLACES": "\033[93m",      # Bright Yellow
    "CHROMIUM": "\033[92m",    # Bright Green
    "SHORTCUTS": "\033[95m",   # Bright Magenta
    "LINES": "\033[37m",       # White
}

# ANSI color codes
COLORS = {
    # Log levels
    "DEBUG": "\033[36m",      # Cyan
    "INFO": "\033[32m",       # Green
    "WARNING": "\033[33m",    # Yellow
    "ERROR": "\033[31m",      # Red
    "CRITICAL": "\033[35m",   # Magenta
    **PREFIX_COLORS,
    # Formatting
    "RESET": "\033[0m",
    "BOLD": "\033[1m",
}

COMPONENT_PREFIXES = list(PREFIX_COLORS)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for levels and component prefixes."""

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        original_msg = record.msg

        reset = COLORS["RESET"]
        record.levelname = f"{COLORS.get(record.levelname, '')}{record.levelname:<7}{reset}"

        if isinstance(record.msg, str):
            msg = record.msg
            for prefix in COMPONENT_PREFIXES:
                bracket_prefix = f"[{prefix}]"
                if bracket_prefix in msg:
                    msg = msg.replace(
                        bracket_prefix,
                        f"{COLORS[prefix]}{COLORS['BOLD']}{bracket_prefix}{reset}",
                    )
            record.msg = msg

        result = super().format(record)

        # Restore original values (in case record is reused)
        record.levelname = original_levelname
        record.msg = original_msg

        return result


def setup_colored_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: If True, log at DEBUG. Otherwise only warnings and errors
            are shown, so a normal run prints nothing but bookmarks.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    fmt = "%(asctime)s %(levelname)s %(message)s"
    datefmt = "%H:%M:%S"

    handler = logging.StreamHandler(sys.stderr)
    if sys.stderr.isatty():
        handler.setFormatter(ColoredFormatter(fmt=fmt, datefmt=datefmt))
    else:
        handler.setFormatter(logging.Formatter(fmt="%(levelname)s %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    root_logger.addHandler(handler)
