[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stcontainers"
version = "0.1.0"
description = "Classic container data structures: doubly linked list, AVL tree, fixed-capacity stack, small generic helpers and a console token reader."
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "data-structures", "avl", "linked-list", "stack", "tokenizer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["stcontainers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
