[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quickfetch"
version = "0.1.0"
description = "Print a short summary of the running Linux system: OS, host, kernel, CPU, memory, disks and more"
requires-python = ">=3.10"
keywords = ["system-information", "fetch", "linux", "terminal", "sysinfo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
quickfetch = "quickfetch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quickfetch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
