[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridcalc"
version = "0.1.0"
description = "A small desktop calculator with an infix expression evaluator built on the shunting-yard algorithm."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "shunting-yard", "expression", "rpn", "arithmetic", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridcalc = "gridcalc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gridcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
