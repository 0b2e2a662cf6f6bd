[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hotline"
version = "0.1.0"
description = "Wire formats, file handling, threaded news and client preferences for the Hotline BBS protocol"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["hotline", "bbs", "protocol", "file-sharing", "news"]
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
    "Topic :: Communications :: BBS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hotline"]

[tool.hatch.build.targets.sdist]
include = ["hotline", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
target-version = "py310"
line-length = 100

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
