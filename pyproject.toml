[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gigiquant"
version = "0.1.0"
description = "Small quantitative tools for price series: returns and Sharpe ratio, outlier days, trend trees and Markov price chains."
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "portfolio", "sharpe-ratio", "markov-chain", "volatility"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gigiquant = "gigiquant.cli:main"
gigiquant-countdown = "gigiquant.countdown:main"

[tool.hatch.build.targets.wheel]
packages = ["gigiquant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
