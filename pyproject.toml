[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "refbreaker"
version = "1.0.0"
description = "Find occurrences of known article titles in a text and write them out as JSON references."
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "references", "titles", "indexing", "json"]
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
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
refbreaker = "refbreaker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["refbreaker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
