[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solvermarket"
version = "0.1.0"
description = "Matrix Market readers for CSR matrices and vectors, with solver timing reports"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["matrix market", "mtx", "csr", "sparse", "linear solver", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["solvermarket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
