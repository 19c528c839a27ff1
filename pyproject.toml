[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csdkit"
version = "1.0.0"
description = "Small utility toolkit: number helpers, dates, bit operations, fractions, complex numbers, geometry, containers and small domain models"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "primes",
    "fraction",
    "complex",
    "geometry",
    "dates",
    "bitwise",
    "containers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
csdkit-simplify = "csdkit.numberutil:main"
csdkit-showfile = "csdkit.textfile:main"

[tool.hatch.build.targets.wheel]
packages = ["csdkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
