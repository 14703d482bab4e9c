[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "numwords"
version = "1.0.0"
description = "Spell out non-negative integers in words using a plain-text number dictionary"
requires-python = ">=3.10"
dependencies = []
keywords = ["numbers", "words", "spelling", "dictionary", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numwords = "numwords.cli:main"

[tool.setuptools.packages.find]
include = ["numwords*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
