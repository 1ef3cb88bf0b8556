[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "regexnfa"
version = "0.1.0"
description = "Build Thompson-construction NFAs and render them as Graphviz diagrams"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "nfa", "automata", "thompson", "graphviz", "dot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["regexnfa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
