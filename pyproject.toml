[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strclient"
version = "0.1.0"
description = "TCP client that requests a number of strings from a server and prints them"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "client", "socket", "protocol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
strclient = "strclient.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["strclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
