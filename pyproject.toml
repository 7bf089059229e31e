[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dreamdex"
version = "0.1.0"
description = "Building blocks for moving Pokémon from Game Boy games to Game Boy Advance games: a Game Boy CPU assembler, GBA ROM tables, save data, Mystery Gift script pieces and the professor's dialogue scripts"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pokemon",
    "game boy",
    "game boy advance",
    "z80",
    "sm83",
    "assembler",
    "save data",
    "mystery gift",
    "dialogue script",
]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dreamdex"]

[tool.hatch.build.targets.sdist]
include = ["dreamdex", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
