[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ckbkit"
version = "0.1.0"
description = "Hex helpers, hashes, epoch packing, Molecule encoding and Omnilock argument and witness types for CKB"
requires-python = ">=3.10"
dependencies = []
keywords = ["ckb", "nervos", "blockchain", "molecule", "omnilock", "hex"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ckbkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
