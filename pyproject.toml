[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dsexercises"
version = "0.1.0"
description = "Classic data-structure exercises: a sequential list with search and sort, polynomial addition, topological sorting and a worker roster."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "algorithms", "sorting", "searching", "polynomial", "topological sort", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsx-polynomial = "dsexercises.polynomial:main"
dsx-toposort = "dsexercises.topology:main"
dsx-workers = "dsexercises.workers:main"

[tool.setuptools.packages.find]
include = ["dsexercises*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
