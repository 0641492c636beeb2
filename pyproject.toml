[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isotd"
version = "0.1.0"
description = "A small isometric tower-defence game with turrets, bullets and a central tower."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tower-defence", "isometric", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
isotd = "isotd.engine:main"
isotd-normalize = "isotd.normalize:main"

[tool.hatch.build.targets.wheel]
packages = ["isotd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
