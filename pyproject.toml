[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vmlshapes"
version = "0.1.0"
description = "Value types for VML drawings in Office Open XML documents: CSS styles, numbers with units, fractions, attribute enumerations, client data anchors and id maps."
requires-python = ">=3.10"
dependencies = []
keywords = ["vml", "ooxml", "office", "xml", "drawing", "css"]
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
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vmlshapes"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
