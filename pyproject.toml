[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "esmdial"
version = "0.1.0"
description = "Extract dialogue topic names from game plugin (.esm) files and pair them across two languages"
requires-python = ">=3.10"
dependencies = []
keywords = ["esm", "plugin", "dialogue", "localization", "strings", "modding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Localization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
esmdial = "esmdial.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["esmdial"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
