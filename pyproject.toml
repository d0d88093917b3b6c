[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "examquest"
version = "0.1.0"
description = "A terminal role-playing game about surviving the last day of final exams"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "terminal", "turn-based"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
examquest = "examquest.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["examquest"]

[tool.pytest.ini_options]
addopts = "-ra"
