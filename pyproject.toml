[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdfmaker"
version = "0.1.0"
description = "Convert grayscale images into 2D signed distance fields for game engines"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["sdf", "signed-distance-field", "image-processing", "game-development", "jump-flooding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sdfmaker = "sdfmaker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sdfmaker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
