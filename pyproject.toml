[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherbox"
version = "0.1.0"
description = "Classical ciphers (Caesar, substitution, Vigenère) with small command-line tools and everyday-pattern examples"
requires-python = ">=3.10"
keywords = ["cipher", "caesar", "vigenere", "substitution", "cryptography", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cipherbox-caesar = "cipherbox.caesar:main"
cipherbox-substitution = "cipherbox.substitution:main"
cipherbox-vigenere = "cipherbox.vigenere:main"
cipherbox-flags = "cipherbox.flags:main"
cipherbox-subcommand = "cipherbox.subcommands:main"
cipherbox-watch = "cipherbox.watcher:main"
cipherbox-concurrency = "cipherbox.concurrency:main"
cipherbox-counter = "cipherbox.counter:main"
cipherbox-signals = "cipherbox.signals:main"
cipherbox-fileops = "cipherbox.fileops:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherbox"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
