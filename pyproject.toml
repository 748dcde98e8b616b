[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aesblocks"
version = "0.1.0"
description = "AES-256 block encryption and decryption of messages, with a timing command-line tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "aes-256", "rijndael", "block cipher", "encryption", "key expansion"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aesblocks = "aesblocks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aesblocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
