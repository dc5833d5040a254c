[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reflexionfinder"
version = "1.0.0"
description = "Find URL query parameters that are reflected in a page's response body"
requires-python = ">=3.10"
keywords = ["security", "reflection", "xss", "fuzzing", "url", "query-parameters"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Information Technology",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "requests>=2.25",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[project.scripts]
reflexionfinder = "reflexionfinder.cli:main"
paramextractor = "reflexionfinder.extract:main"

[tool.hatch.build.targets.wheel]
packages = ["reflexionfinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
