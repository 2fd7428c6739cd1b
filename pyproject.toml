[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jumprun"
version = "0.1.0"
description = "A small side-scrolling jump-and-run game with sprite-sheet animation"
requires-python = ">=3.10"
keywords = ["game", "platformer", "jump-and-run", "pygame", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pygame",
]

[project.scripts]
jumprun = "jumprun.game:main"

[tool.hatch.build.targets.wheel]
packages = ["jumprun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
