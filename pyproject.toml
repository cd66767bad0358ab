[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pholi"
version = "0.1.0"
description = "Building blocks for a partial higher-order logic: a tokenizer, name stacks, three-valued lattice operations and finite function tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "higher-order logic", "three-valued logic", "tokenizer", "finite models"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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
pholi-tokenize = "pholi.tokenizer:main"

[tool.hatch.build.targets.wheel]
packages = ["pholi"]

[tool.pytest.ini_options]
addopts = "-ra"
