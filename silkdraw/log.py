"""Plain console logging with level prefixes."""

from __future__ import annotations

import sys

from .errors import SilkError

_MAX_MESSAGE = 255


def _emit(prefix: str, text: str, args: tuple) -> None:
    message = text % args if args else text
    print(f"[{prefix}] {message[:_MAX_MESSAGE]}", file=sys.stdout)


def log_info(text: str, *args: object) -> None:
    """Print an info line, formatting ``text`` with ``args`` printf-style."""
    _emit("INFO", text, args)


def log_warn(text: str, *args: object) -> None:
    """Print a warning line, formatting ``text`` with ``args`` printf-style."""
    _emit("WARN", text, args)


def log_err(text: str, *args: object) -> None:
    """Print an error line, formatting ``text`` with ``args`` printf-style."""
    _emit("ERR", text, args)


def log_alpha_blend_status(enabled: bool = True) -> None:
    """Report whether alpha blending is on."""
    log_info("Alpha-Blending: %s", "ENABLED" if enabled else "DISABLED")


def log_byte_order_status(byteorder: str = sys.byteorder) -> None:
    """Report the byte order, ``"little"`` or ``"big"``."""
    if byteorder == "little":
        log_info("Byte order: LITTLE ENDIAN")
    elif byteorder == "big":
        log_info("Byte order: BIG ENDIAN")
    else:
        raise SilkError()