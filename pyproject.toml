[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "disarray"
version = "0.1.0"
description = "Sprite batching, texture atlases, shader lists, settings files and renderer setup rules for 2D games"
requires-python = ">=3.10"
dependencies = []
keywords = ["sprites", "texture atlas", "batching", "vulkan", "shaders", "2d", "games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["disarray"]

[tool.pytest.ini_options]
addopts = "-ra"
