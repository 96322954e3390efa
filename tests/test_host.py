import io
import re

import pytest

from quickfetch.host import HostInfo, detect_host, format_host, is_meaningful_host_value, print_host
from quickfetch.output import Printer

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def write(root, relative, content):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


@pytest.mark.parametrize(
    "value",
    ["", "To be filled by O.E.M.", "System Product Name", "  none \n", "OEMx", "all series"],
)
def test_placeholders_rejected(value):
    assert is_meaningful_host_value(value) is False


def test_real_value_accepted():
    assert is_meaningful_host_value(" ThinkPad X1 \n") is True


def test_qemu_prefix(tmp_path):
    write(tmp_path, "sys/class/dmi/id/product_name", "Standard PC (Q35 + ICH9, 2009)\n")
    write(tmp_path, "sys/class/dmi/id/product_version", "pc-q35-7.2\n")
    info = detect_host(str(tmp_path))
    assert info.name == "KVM/QEMU Standard PC (Q35 + ICH9, 2009)"
    assert format_host(info) == "KVM/QEMU Standard PC (Q35 + ICH9, 2009) pc-q35-7.2"


def test_devices_path_preferred(tmp_path):
    write(tmp_path, "sys/devices/virtual/dmi/id/product_name", "Preferred\n")
    write(tmp_path, "sys/class/dmi/id/product_name", "Other\n")
    assert detect_host(str(tmp_path)).name == "Preferred"


def test_devicetree_model(tmp_path):
    write(tmp_path, "sys/firmware/devicetree/base/model", "Raspberry Pi 4 Model B\x00")
    assert detect_host(str(tmp_path)).name == "Raspberry Pi 4 Model B"


def test_family_used_when_name_placeholder(tmp_path):
    write(tmp_path, "sys/class/dmi/id/product_family", "ThinkPad\n")
    write(tmp_path, "sys/class/dmi/id/product_name", "To be filled by O.E.M.\n")
    write(tmp_path, "sys/class/dmi/id/product_version", "None\n")
    assert format_host(detect_host(str(tmp_path))) == "ThinkPad"


def test_nothing_set(tmp_path):
    write(tmp_path, "sys/class/dmi/id/product_name", "Default string\n")
    with pytest.raises(LookupError):
        detect_host(str(tmp_path))


def test_format_host_without_version():
    assert format_host(HostInfo(name="Desk", version="Not Specified")) == "Desk"


def test_print_host(tmp_path):
    write(tmp_path, "sys/class/dmi/id/product_name", "Desk\n")
    stream = io.StringIO()
    print_host(Printer(stream=stream), str(tmp_path))
    assert ANSI.sub("", stream.getvalue()) == "Host: Desk\n"


def test_print_host_error(tmp_path):
    stream = io.StringIO()
    print_host(Printer(stream=stream, show_errors=True), str(tmp_path))
    assert "neither family nor name is set by O.E.M." in stream.getvalue()