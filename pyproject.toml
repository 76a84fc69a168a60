[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pqcrkit"
version = "0.1.0"
description = "Building blocks for post-quantum signature schemes: constant-divisor arithmetic, compact vector encoding, Esch/XOEsch hashing and symmetric primitives"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "post-quantum",
    "signatures",
    "esch",
    "xoesch",
    "sparkle",
    "shake256",
    "sphincs",
    "vector-encoding",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["pqcrkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
