[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motionbox"
version = "1.0.0"
description = "Building blocks for background-subtraction motion detection on 8-bit images: filtering, thresholding, binary morphology and bounding boxes."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "motion detection",
    "background subtraction",
    "gaussian blur",
    "morphology",
    "dilation",
    "erosion",
    "bounding boxes",
]
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
packages = ["motionbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
