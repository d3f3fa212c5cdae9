[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nexpanel"
version = "0.1.0"
description = "Drive Nextion HMI touch displays over a serial line"
requires-python = ">=3.10"
keywords = ["nextion", "hmi", "touch display", "serial", "uart"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Serial",
]
dependencies = ["pyserial"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nexpanel-table = "nexpanel.table:main"

[tool.hatch.build.targets.wheel]
packages = ["nexpanel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
