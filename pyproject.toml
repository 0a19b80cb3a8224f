[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathfinding"
version = "4.14.0"
description = "Spanning trees, maximal cliques, connected components, Kuhn-Munkres assignment and a rectangular matrix type"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "matching",
    "hungarian",
    "kuhn-munkres",
    "kruskal",
    "prim",
    "cliques",
    "connected-components",
    "matrix",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pathfinding"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
