[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iptsd"
version = "0.1.0"
description = "Building blocks for IPTS touch data: binary reading, HID reports, contact clustering, stabilization and calibration"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["touchscreen", "ipts", "hid", "heatmap", "contacts", "calibration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Hardware Drivers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["iptsd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
