[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "staffroll"
version = "0.1.0"
description = "A small staff register of people, employees and programmers with an interactive console"
requires-python = ">=3.10"
dependencies = []
keywords = ["staff", "employees", "register", "cpf", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
staffroll = "staffroll.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["staffroll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
