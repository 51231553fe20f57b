[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "txledger"
version = "0.1.0"
description = "Replay a CSV of client transactions and print the resulting account balances"
requires-python = ">=3.10"
dependencies = []
keywords = ["transactions", "accounts", "ledger", "csv", "disputes", "chargeback"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
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

[project.scripts]
txledger = "txledger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["txledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
