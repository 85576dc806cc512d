"""Terminal Output Formatting Package"""

import sys
import os
from typing import Optional


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    ITALIC = '\033[3m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    CYAN = '\033[36m'


def _supports_color(stream=None) -> bool:
    stream = stream or sys.stdout
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(stream, 'isatty') or not stream.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except (AttributeError, OSError):
            return False
    return True


def _supports_unicode() -> bool:
    try:
        '✓✗⚠'.encode(sys.stdout.encoding or 'utf-8')
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _supports_color(sys.stdout)
STDERR_COLORS_ENABLED = _supports_color(sys.stderr)
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
WARN = '⚠' if UNICODE_ENABLED else '[!]'


def _colorize(text: str, *codes: str, enabled: Optional[bool] = None) -> str:
    if enabled is None:
        enabled = COLORS_ENABLED
    if not enabled:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def note(text: str) -> str:
    return _colorize(text, Colors.ITALIC, Colors.BLUE)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {_colorize(message, Colors.BOLD, Colors.GREEN)}")


def print_error(message: str) -> None:
    # stderr may be a terminal while stdout is piped, or the other way round
    enabled = STDERR_COLORS_ENABLED
    print(
        f"{_colorize(CROSS, Colors.RED, enabled=enabled)} "
        f"{_colorize(message, Colors.BOLD, Colors.RED, enabled=enabled)}",
        file=sys.stderr,
    )


def print_warning(message: str) -> None:
    print(f"{warning(WARN)} {_colorize(message, Colors.BOLD, Colors.YELLOW)}")


__all__ = [
    "Colors", "COLORS_ENABLED", "STDERR_COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "WARN",
    "success", "warning", "info", "note", "dim", "bold",
    "print_success", "print_error", "print_warning",
]
