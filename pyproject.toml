[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "sanduba"
version = "0.1.0"
description = "Console point-of-sale and back-office tools for a made-to-order sandwich shop"
requires-python = ">=3.10"
dependencies = []
keywords = ["point-of-sale", "sandwich", "inventory", "shop", "financial-report"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sanduba = "sanduba.cli:main"

[tool.setuptools.packages.find]
include = ["sanduba*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
