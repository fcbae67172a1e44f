[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakegrid"
version = "0.1.0"
description = "A classic grid-based snake game with score keeping and selectable speeds"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "arcade", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakegrid = "snakegrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["snakegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
