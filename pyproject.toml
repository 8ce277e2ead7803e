[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labstructs"
version = "0.1.0"
description = "Classic data structures and operating-systems exercises: shifting and circular queues, a treap, an N-Queens solver, a mini shell and a toy floppy file system"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "queue",
    "circular queue",
    "treap",
    "n-queens",
    "backtracking",
    "shell",
    "file system",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labstructs-queues = "labstructs.queue_demo:main"
labstructs-treap = "labstructs.treap:main"
labstructs-nqueens = "labstructs.nqueens:main"
labstructs-shell = "labstructs.shell:main"
labstructs-filesys = "labstructs.filesys:main"

[tool.hatch.build.targets.wheel]
packages = ["labstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
