[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "intercept"
version = "0.1.0"
description = "Headless simulation of projectiles that aim at moving targets under gravity, with obstacles"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["physics", "simulation", "ballistics", "trajectory", "education"]
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

[project.scripts]
intercept = "intercept.app:main"

[tool.hatch.build.targets.wheel]
packages = ["intercept"]

[tool.pytest.ini_options]
addopts = "-ra"
