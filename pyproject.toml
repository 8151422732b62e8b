[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixeduint"
version = "0.1.0"
description = "Fixed-width unsigned big integers with overflow-aware arithmetic"
requires-python = ">=3.10"
keywords = ["bigint", "uint256", "uint512", "fixed-width", "unsigned", "arithmetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
fixeduint-modular = "fixeduint.modular:main"

[tool.hatch.build.targets.wheel]
packages = ["fixeduint"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
