[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolechess"
version = "1.0.0"
description = "A console chess game for two players, or one player against a simple computer opponent"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "game", "console", "board-game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consolechess = "consolechess.console:main"

[tool.hatch.build.targets.wheel]
packages = ["consolechess"]

[tool.pytest.ini_options]
addopts = "-ra"
