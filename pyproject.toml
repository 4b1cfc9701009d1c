[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ignis"
version = "0.1.0"
description = "Building blocks of a small 2D game engine and editor: key and mouse codes, events, input state, geometry, scene components, a camera, texture and vertex layout descriptions, and a content browser model."
requires-python = ">=3.10"
keywords = ["game engine", "camera", "events", "geometry", "vertex layout", "editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ignis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
