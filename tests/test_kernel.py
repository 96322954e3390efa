import io
import platform
import re

from quickfetch.kernel import detect_kernel, print_kernel
from quickfetch.output import Printer

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def test_detect_kernel_release():
    info = detect_kernel()
    assert info.release == platform.release()
    assert info.system == platform.system()


def test_print_kernel():
    stream = io.StringIO()
    print_kernel(Printer(stream=stream))
    assert ANSI.sub("", stream.getvalue()) == f"Kernel: {detect_kernel().release}\n"