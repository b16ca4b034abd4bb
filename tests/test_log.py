import pytest

from silkdraw.errors import SilkError
from silkdraw.log import (
    log_alpha_blend_status,
    log_byte_order_status,
    log_err,
    log_info,
    log_warn,
)


def test_info_prefix(capsys):
    log_info("hello")
    assert capsys.readouterr().out == "[INFO] hello\n"


def test_warn_formats_arguments(capsys):
    log_warn("Image resolution: x.%i, y.%i", 4, 7)
    assert capsys.readouterr().out == "[WARN] Image resolution: x.4, y.7\n"


def test_err_prefix(capsys):
    log_err("Image loading failure: %s", "bad")
    assert capsys.readouterr().out == "[ERR] Image loading failure: bad\n"


def test_text_without_args_keeps_percent(capsys):
    log_info("100%")
    assert capsys.readouterr().out == "[INFO] 100%\n"


def test_long_message_truncated(capsys):
    log_info("x" * 1000)
    line = capsys.readouterr().out.rstrip("\n")
    assert line.startswith("[INFO] ")
    assert len(line) - len("[INFO] ") == 255


@pytest.mark.parametrize(
    "enabled, word", [(True, "ENABLED"), (False, "DISABLED")]
)
def test_alpha_blend_status(capsys, enabled, word):
    log_alpha_blend_status(enabled)
    assert capsys.readouterr().out == f"[INFO] Alpha-Blending: {word}\n"


@pytest.mark.parametrize(
    "order, text", [("little", "LITTLE ENDIAN"), ("big", "BIG ENDIAN")]
)
def test_byte_order_status(capsys, order, text):
    log_byte_order_status(order)
    assert capsys.readouterr().out == f"[INFO] Byte order: {text}\n"


def test_byte_order_unknown_raises():
    with pytest.raises(SilkError, match="Undefined behaviour."):
        log_byte_order_status("middle")