[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tofsdk"
version = "6.1.0"
description = "Time-of-flight depth camera definitions, status codes and open depth-compute algorithms"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["time-of-flight", "tof", "depth", "point-cloud", "xyz", "adsd3500", "camera"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tofsdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
