[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leggedtraj"
version = "0.1.0"
description = "Spline, gait and dynamics building blocks for trajectory optimization of legged robots"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "legged robots",
    "trajectory optimization",
    "hermite spline",
    "gait",
    "rigid body dynamics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["leggedtraj"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
