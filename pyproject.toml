[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kruskal-variants"
version = "0.1.0"
description = "Kruskal's minimum spanning tree algorithm in several variants: heap, quicksort, filter, skewed filter and per-vertex stars."
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "mst", "kruskal", "algorithm", "union-find", "minimum-spanning-tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kruskal-variants = "kruskal_variants.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kruskal_variants"]

[tool.pytest.ini_options]
addopts = "-ra"
