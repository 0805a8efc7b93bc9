[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "megashell"
version = "0.1.0"
description = "A small interactive shell that runs single commands and file-to-file pipelines"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "pipeline", "pipex", "heredoc", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
megashell = "megashell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["megashell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
