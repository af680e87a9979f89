[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basetypes"
version = "0.1.0"
description = "Basic robotics data types: time, temperature, twists, wrenches, waypoints and transforms with covariance"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["robotics", "time", "temperature", "transform", "covariance", "twist", "wrench", "quaternion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["basetypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
