[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lfx_auth"
version = "0.1.0"
description = "Building blocks for an authentication service: typed errors, redaction helpers, structured JSON logging and a retrying HTTP client."
requires-python = ">=3.10"
dependencies = []
keywords = ["auth", "http", "retry", "logging", "redaction"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lfx_auth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
