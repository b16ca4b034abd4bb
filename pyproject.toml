[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "silkdraw"
version = "1.0.0"
description = "A small CPU rasteriser for drawing shapes, text and images into 32-bit pixel buffers"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["graphics", "rasterizer", "pixel-buffer", "software-rendering", "bitmap-font"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["silkdraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
