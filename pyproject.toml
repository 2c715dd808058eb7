[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "menagerie"
version = "0.1.0"
description = "A collection of small data structures, algorithms and command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "gcd",
    "queue",
    "binary-tree",
    "gap-buffer",
    "interval",
    "complex",
    "json",
    "grep",
    "echo-server",
    "router",
    "wsgi",
]
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

[project.scripts]
menagerie-gcd = "menagerie.gcd:main"
menagerie-gcd-server = "menagerie.gcd_server:main"
menagerie-copy = "menagerie.copy_tool:main"
menagerie-grep = "menagerie.grep:main"
menagerie-echo-server = "menagerie.echo_server:main"
menagerie-http-get = "menagerie.http_get:main"

[tool.hatch.build.targets.wheel]
packages = ["menagerie"]

[tool.hatch.build.targets.sdist]
include = ["menagerie", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["menagerie"]
