import io

import pytest

from quickfetch.output import Printer
from quickfetch.resolution import (
    Resolution,
    format_resolution,
    parse_mode,
    print_resolution,
    read_drm_modes,
    round_refresh_rate,
)


def make_connector(base, name, modes=None):
    directory = base / name
    directory.mkdir()
    if modes is not None:
        (directory / "modes").write_text(modes)


def test_parse_mode_reads_first_line():
    assert parse_mode("1920x1080\n1280x720\n") == Resolution(1920, 1080, 0)


@pytest.mark.parametrize("text", ["", "garbage", "0x0", "1920x0"])
def test_parse_mode_rejects_invalid(text):
    assert parse_mode(text) is None


def test_read_drm_modes_skips_empty_and_missing(tmp_path):
    make_connector(tmp_path, "card0-HDMI-A-1", "1920x1080\n")
    make_connector(tmp_path, "card0-DP-1", "")
    make_connector(tmp_path, "card0")
    assert read_drm_modes(str(tmp_path)) == [Resolution(1920, 1080)]


def test_read_drm_modes_missing_dir(tmp_path):
    with pytest.raises(OSError):
        read_drm_modes(str(tmp_path / "absent"))


def test_read_drm_modes_no_modes(tmp_path):
    make_connector(tmp_path, "card0-DP-1", "")
    with pytest.raises(LookupError):
        read_drm_modes(str(tmp_path))


def test_round_refresh_rate_special_case():
    assert round_refresh_rate(144) == 144
    assert round_refresh_rate(145) == 144


@pytest.mark.parametrize("rate", [0, -5])
def test_round_refresh_rate_non_positive(rate):
    assert round_refresh_rate(rate) == 0


@pytest.mark.parametrize("rate", range(1, 300))
def test_round_refresh_rate_invariant(rate):
    result = round_refresh_rate(rate)
    assert result == 144 or result % 5 == 0
    assert abs(result - rate) <= 2


def test_round_refresh_rate_keeps_multiples():
    assert round_refresh_rate(60) == 60


def test_format_resolution():
    assert format_resolution(Resolution(1920, 1080)) == "1920x1080"
    assert format_resolution(Resolution(1920, 1080, 60)) == "1920x1080 @ 60Hz"


def test_print_single_display_not_numbered(tmp_path):
    make_connector(tmp_path, "card0-HDMI-A-1", "1920x1080\n")
    stream = io.StringIO()
    print_resolution(Printer(stream), str(tmp_path))
    assert stream.getvalue() == "\033[1mResolution\033[0m: 1920x1080\n"


def test_print_several_displays_numbered(tmp_path):
    make_connector(tmp_path, "card0-DP-1", "2560x1440\n")
    make_connector(tmp_path, "card0-HDMI-A-1", "1920x1080\n")
    stream = io.StringIO()
    print_resolution(Printer(stream), str(tmp_path))
    lines = stream.getvalue().splitlines()
    assert lines == [
        "\033[1mResolution 1\033[0m: 2560x1440",
        "\033[1mResolution 2\033[0m: 1920x1080",
    ]


def test_print_error_when_dir_missing(tmp_path):
    stream = io.StringIO()
    missing = str(tmp_path / "absent")
    print_resolution(Printer(stream, show_errors=True), missing)
    assert f"Couldn't connect to a display server or open {missing}" in stream.getvalue()