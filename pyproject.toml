[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "higher_lower"
version = "1.0.0"
description = "A terminal game: guess whether the next random number will be higher or lower."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "higher-lower", "guessing"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
higher-lower = "higher_lower.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["higher_lower"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
