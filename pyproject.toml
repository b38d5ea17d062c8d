[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "milolog"
version = "0.0.1"
description = "Simple logger that writes to the console and to rotated log files"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "log rotation", "log file", "console", "ansi colors"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
milolog-example = "milolog.example:main"

[tool.hatch.build.targets.wheel]
packages = ["milolog"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
