[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aes128"
version = "0.1.0"
description = "A small pure-Python AES-128 block cipher with in-place file encryption"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "aes-128", "rijndael", "block cipher", "encryption", "galois field"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
aes128 = "aes128.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aes128"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
