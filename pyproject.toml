[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcskit"
version = "0.3.1"
description = "Helpers for a cloud-storage shell: argument parsing, a triple-hash hashtable, a block write cache, local file helpers, error messages and a lenient JSON tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["hashtable", "json", "arguments", "write-cache", "filesystem", "error-messages"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pcskit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
