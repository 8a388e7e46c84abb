[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rhaster"
version = "0.1.0"
description = "Building blocks for a small 2D game engine: hashing, data containers, frame timing, input binding types, sound service decorators, scene selection, resource caching and a z-ordered render queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "2d", "input", "timing", "scene", "render-queue"]
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rhaster"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
