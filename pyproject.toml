[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskstat"
version = "1.0.0"
description = "System readings (CPU, memory, battery, network, keyboard, volume) formatted as short status strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["status", "statusbar", "monitor", "system", "procfs", "sysfs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["deskstat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
