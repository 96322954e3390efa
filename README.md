# quickfetch

quickfetch prints a compact summary of the machine it runs on: user and
host name, operating system, hardware model, kernel, uptime, process
count, installed packages, display resolution, CPU, memory, disks,
batteries, local IP addresses and locale, followed by a palette of the
terminal's colours.

Most of the information is read straight from `/proc`, `/sys` and
`/etc`, so it is meant for Linux systems.

## Installation

```
pip install .
```

## Usage

```
quickfetch
quickfetch --color 34
quickfetch --show-errors
```

- `--color` takes SGR parameters (for example `34` or `1;36`) used to
  colour the keys and the title.
- `--show-errors` prints a line for every module that could not detect
  its value. Without it such lines are left out, so a machine without a
  battery simply has no `Battery` line.

Each line has a key such as `OS`, `CPU` or `Memory`, then its value.
Where there are several batteries or displays, the keys are numbered
(`Battery 1`, `Battery 2`, ...). Disks are shown as `Disk (/)` and, when
it is a separate file system, `Disk (/home)`; local addresses as
`Local Ip (eth0)`. Only IPv4 addresses of non-loopback interfaces are
shown by the command.

## Using it as a library

Each piece of information has its own module with functions that
detect, format and print it:

| Module | Detect | Format |
| --- | --- | --- |
| `quickfetch.title` | `detect_title()` | `format_title()`, `format_separator()` |
| `quickfetch.osinfo` | `detect_os()`, `parse_os_release()` | `format_os()` |
| `quickfetch.host` | `detect_host(root)` | `format_host()` |
| `quickfetch.kernel` | `detect_kernel()` | |
| `quickfetch.uptime` | `read_uptime(path)`, `split_uptime()` | `format_uptime()` |
| `quickfetch.processes` | `count_processes(proc_dir)` | |
| `quickfetch.packages` | `detect_packages(root)` | `format_packages()` |
| `quickfetch.resolution` | `read_drm_modes(drm_dir)`, `parse_mode()` | `format_resolution()` |
| `quickfetch.cpu` | `detect_cpu(root)`, `parse_cpuinfo()` | `format_cpu()`, `prettify_cpu_name()` |
| `quickfetch.memory` | `read_memory(path)`, `parse_meminfo()` | `format_memory()` |
| `quickfetch.disk` | `disk_usage_from_statvfs()` | `format_disk()`, `disk_key()` |
| `quickfetch.battery` | `find_batteries(base_dir)`, `read_battery()` | `format_battery()` |
| `quickfetch.localip` | `collect_addresses()`, `filter_addresses()` | |
| `quickfetch.localeinfo` | `detect_locale(conf_path, environ)` | |

Every module also has a `print_*` function that takes a
`quickfetch.output.Printer`. Detection failures are raised as `OSError`,
`LookupError` or `ValueError`; the `print_*` functions turn them into
error lines, which the printer shows only when `show_errors` is set.

```python
import sys

from quickfetch.output import Printer
from quickfetch.memory import read_memory, format_memory
from quickfetch.uptime import format_uptime

print(format_memory(read_memory("/proc/meminfo")))
print(format_uptime(93784))   # "1 day, 2 hours, 3 mins"

printer = Printer(sys.stdout, "34", False)
printer.print_value("Shell", "bash")
printer.print_colors()
```

Readers such as `quickfetch.cpu.detect_cpu`, `quickfetch.host.detect_host`
and `quickfetch.packages.detect_packages` take the root directory to look
in, so they can be pointed at a copy of a file system tree.

`quickfetch.text` holds the small string helpers used to clean up
detected values, and `quickfetch.valuestore.ValueStore` is a
case-insensitive name/value store.

## What it does not do

quickfetch does not detect the shell, terminal, terminal font, desktop
environment, window manager, themes, icons, fonts, cursor or GPU, and
it shows no distribution logo. Display resolutions come only from the
kernel's DRM connector files, not from a running display server, so no
refresh rate is reported. There is no configuration file and no cache.

## Running the tests

```
pip install ".[test]"
pytest
```