[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doglookup"
version = "0.2.1"
description = "Decoding DNS wire-format names, header flags and resource records"
requires-python = ">=3.10"
dependencies = ["idna"]
keywords = ["dns", "wire-format", "resource-records", "parser", "edns"]
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
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["doglookup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
