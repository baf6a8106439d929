[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qsimulator"
version = "0.1.0"
description = "A state-vector quantum circuit simulator with QFT-based arithmetic and Shor's factoring algorithm"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "quantum",
    "simulator",
    "state vector",
    "quantum fourier transform",
    "shor",
    "quantum arithmetic",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["qsimulator"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
