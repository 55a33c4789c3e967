[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msdscript"
version = "1.0.0"
description = "A small expression language with let-bindings, conditionals and first-class functions, with a parser, interpreter, pretty printer and Tk desktop window"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "expression language", "pretty printer", "parser", "closures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
msdscript = "msdscript.app:main"

[tool.hatch.build.targets.wheel]
packages = ["msdscript"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
