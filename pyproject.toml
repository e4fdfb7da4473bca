[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statki"
version = "0.1.0"
description = "Battleship game logic, touch-panel calibration and a pixel-level board renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "statki", "board game", "touch calibration", "bitmap font", "rgb565"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["statki"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
