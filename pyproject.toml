[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snaketwo"
version = "1.0.0"
description = "An arcade snake game with levels, a colour shop and achievements"
requires-python = ">=3.10"
keywords = ["snake", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
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
snaketwo = "snaketwo.game:main"

[tool.hatch.build.targets.wheel]
packages = ["snaketwo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
