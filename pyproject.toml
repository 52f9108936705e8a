[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storekeeper"
version = "0.1.0"
description = "Terminal store management: record, browse, filter, sort and remove products kept in CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "store", "products", "avl-tree", "terminal", "menu", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
storekeeper = "storekeeper.app:main"

[tool.hatch.build.targets.wheel]
packages = ["storekeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
