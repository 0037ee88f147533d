[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minissh"
version = "0.1.0"
description = "Multi-precision integer helpers, Curve25519 scalar multiplication, AES-CBC/CTR block ciphers and SSH channel state"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["ssh", "bignum", "curve25519", "aes", "cbc", "ctr", "number-theory"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["minissh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
