[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "readadviser"
version = "0.1.0"
description = "A Telegram bot that keeps links to pages and offers a random one to read later"
requires-python = ">=3.10"
dependencies = []
keywords = ["telegram", "bot", "read-later", "bookmarks", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
readadviser = "readadviser.main:main"

[tool.hatch.build.targets.wheel]
packages = ["readadviser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
