[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quotefile"
version = "0.1.0"
description = "Store quotes as JSON files in a folder, manage them as resources, and serve them as an HTML page"
requires-python = ">=3.10"
dependencies = []
keywords = ["quotes", "json", "files", "resource", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quote-server = "quotefile.server:main"

[tool.hatch.build.targets.wheel]
packages = ["quotefile"]

[tool.pytest.ini_options]
addopts = "-ra"
