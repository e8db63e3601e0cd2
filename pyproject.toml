[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherbox"
version = "0.1.0"
description = "Classical and historical ciphers, block and stream ciphers, hashes and an error-correcting code"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cipher",
    "cryptography",
    "des",
    "blowfish",
    "rc4",
    "arcfour",
    "enigma",
    "md2",
    "md5",
    "caesar",
    "vigenere",
    "atbash",
    "scytale",
    "hamming",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cipherbox-des = "cipherbox.des:main"
cipherbox-arcfour = "cipherbox.arcfour:main"
cipherbox-blowfish = "cipherbox.blowfish:main"
cipherbox-hamming = "cipherbox.hamming:main"
cipherbox-gali = "cipherbox.gali:main"
cipherbox-enigma = "cipherbox.enigma:main"
cipherbox-md2 = "cipherbox.md2:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherbox"]

[tool.pytest.ini_options]
addopts = "-ra"
