[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "conflux"
version = "0.1.0"
description = "Set reconciliation core: polynomial arithmetic over finite fields, factoring and rational function interpolation"
requires-python = ">=3.10"
dependencies = []
keywords = ["set reconciliation", "finite field", "polynomial", "interpolation", "synchronization"]
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
    "Topic :: System :: Distributed Computing",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
conflux-primegen = "conflux.primegen:main"

[tool.hatch.build.targets.wheel]
packages = ["conflux"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
