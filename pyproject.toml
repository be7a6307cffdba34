[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixeduint"
version = "1.14.0"
description = "Fixed bit-width unsigned integers with RLP, DER, SSZ, Borsh, SCALE and hex encodings"
requires-python = ">=3.10"
dependencies = []
keywords = ["uint", "bigint", "rlp", "der", "ssz", "borsh", "scale", "fixed-width"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["fixeduint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
