[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridinput"
version = "0.10.3"
description = "Keyboard, mouse and window event handling for a grid-based editor front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "keyboard", "mouse", "touch", "input", "grid", "gui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridinput"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
