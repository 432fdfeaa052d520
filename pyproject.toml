[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mavkit"
version = "0.1.0"
description = "MAVLink helpers: enum naming, frame transforms, sensor orientations and link/radio diagnostics"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["mavlink", "uav", "drone", "autopilot", "quaternion", "diagnostics"]
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
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mavkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
