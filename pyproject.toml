[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cosmosdodge"
version = "1.0.0"
description = "A three-level arcade game: dodge falling aliens until the clock runs out."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "dodge", "aliens"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cosmosdodge = "cosmosdodge.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cosmosdodge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
