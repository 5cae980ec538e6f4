[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "formulakit"
version = "0.1.0"
description = "Secondary-school mathematics formulas: algebra, complex numbers, statistics, vectors, trigonometry, plane and solid geometry."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mathematics",
    "formulas",
    "geometry",
    "trigonometry",
    "statistics",
    "vectors",
    "complex numbers",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["formulakit"]

[tool.hatch.build.targets.sdist]
include = ["formulakit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["formulakit"]
