[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdview"
version = "0.1.0"
description = "Multidimensional views over flat sequences with pluggable layout mappings"
requires-python = ">=3.10"
dependencies = []
keywords = ["mdspan", "multidimensional", "array", "view", "layout", "stride", "subspan", "tiled"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mdview-subspan = "mdview.core:main"
mdview-tiled = "mdview.tiled:main"
mdview-dot-product = "mdview.dot_product:main"

[tool.hatch.build.targets.wheel]
packages = ["mdview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
