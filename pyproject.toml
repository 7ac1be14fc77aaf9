[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lancer"
version = "0.1.0"
description = "Freehand stroke drawing logic with simulated pen pressure, undo and an HSV colour wheel picker."
requires-python = ">=3.10"
dependencies = []
keywords = ["drawing", "painting", "strokes", "canvas", "color-picker", "hsv"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lancer = "lancer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lancer"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
