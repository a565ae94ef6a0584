[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zila"
version = "0.1.8"
description = "Call functions on time-based events: every day, hour, minute or second, after a timeout, or at an interval"
requires-python = ">=3.10"
dependencies = []
keywords = ["event", "timeout", "interval", "everyday", "scheduling", "asyncio"]
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
    "Framework :: AsyncIO",
    "Environment :: Console",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
zila = "zila.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zila"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
