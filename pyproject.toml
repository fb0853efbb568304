[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "artcanvas"
version = "0.1.0"
description = "Fractal art from a small instruction language, rendered to raster images"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["fractal", "art", "sierpinski", "drawing", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
artcanvas = "artcanvas.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["artcanvas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
