import io

import pytest

from quickfetch.battery import (
    BatteryInfo,
    find_batteries,
    format_battery,
    print_battery,
    read_battery,
)
from quickfetch.output import Printer


def make_battery(base, name, **files):
    directory = base / name
    directory.mkdir()
    for filename, content in files.items():
        (directory / filename).write_text(content + "\n")
    return directory


def test_read_battery(tmp_path):
    directory = make_battery(
        tmp_path,
        "BAT0",
        manufacturer="ACME",
        model_name="Cell",
        technology="Li-ion",
        capacity="87",
        status="Discharging",
    )
    info = read_battery(directory)
    assert info == BatteryInfo("ACME", "Cell", "Li-ion", "87", "Discharging")


def test_unknown_status_is_cleared(tmp_path):
    directory = make_battery(tmp_path, "BAT0", capacity="50", status="Unknown")
    assert read_battery(directory).status == ""


def test_read_battery_without_data(tmp_path):
    directory = make_battery(tmp_path, "BAT0", status="unknown")
    with pytest.raises(LookupError, match="could be read"):
        read_battery(directory)


def test_format_with_status():
    assert format_battery(BatteryInfo(capacity="87", status="Discharging")) == "87% [Discharging]"


def test_format_full_status_hidden():
    assert format_battery(BatteryInfo(capacity="100", status="Full")) == "100%"


def test_format_status_only():
    assert format_battery(BatteryInfo(status="Charging")) == "Charging"


def test_find_batteries_skips_non_batteries(tmp_path):
    make_battery(tmp_path, "AC", online="1")
    bat = make_battery(tmp_path, "BAT0", capacity="40")
    assert find_batteries(str(tmp_path)) == [bat]


def test_find_batteries_errors(tmp_path):
    with pytest.raises(ValueError):
        find_batteries("")
    with pytest.raises(LookupError, match="doesn't contain any battery folder"):
        find_batteries(str(tmp_path))
    with pytest.raises(OSError):
        find_batteries(str(tmp_path / "missing"))


def test_print_single_battery_unnumbered(tmp_path):
    make_battery(tmp_path, "BAT0", capacity="40", status="Charging")
    stream = io.StringIO()
    print_battery(Printer(stream=stream), str(tmp_path))
    output = stream.getvalue()
    assert "40% [Charging]" in output
    assert "Battery 1" not in output


def test_print_several_batteries_numbered(tmp_path):
    make_battery(tmp_path, "BAT0", capacity="40")
    make_battery(tmp_path, "BAT1", capacity="60")
    stream = io.StringIO()
    print_battery(Printer(stream=stream), str(tmp_path))
    output = stream.getvalue()
    assert "Battery 1" in output and "Battery 2" in output
    assert output.index("40%") < output.index("60%")


def test_print_error_shown(tmp_path):
    stream = io.StringIO()
    print_battery(Printer(stream=stream, show_errors=True), str(tmp_path))
    assert "doesn't contain any battery folder" in stream.getvalue()