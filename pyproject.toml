[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "staffledger"
version = "0.1.0"
description = "Employee records, project staffing and salary calculation for small teams"
requires-python = ">=3.10"
dependencies = []
keywords = ["payroll", "salary", "employees", "projects", "staffing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["staffledger*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
