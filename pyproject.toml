[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glyphterm"
version = "0.1.0"
description = "A small graphical terminal emulator that runs a shell in a pseudo-terminal"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["terminal", "emulator", "pty", "ansi", "utf-8"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
glyphterm = "glyphterm.app:main"

[tool.hatch.build.targets.wheel]
packages = ["glyphterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
