[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ninetools"
version = "0.1.0"
description = "Small command-line tools: a bitcoin price converter, an RPN calculator and a merge-insertion sorter"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpn", "calculator", "merge-insertion", "ford-johnson", "sorting", "exchange-rate"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
btc = "ninetools.btc:main"
rpn = "ninetools.rpn:main"
pmergeme = "ninetools.pmerge_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ninetools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
