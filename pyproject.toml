[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clvmtools"
version = "0.1.0"
description = "S-expression reader, source locations, primitive tables and include preprocessing for a CLVM-targeting Lisp compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["clvm", "chialisp", "lisp", "s-expression", "compiler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["clvmtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
