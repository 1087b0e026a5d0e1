[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gfastkit"
version = "3.2.4"
description = "Building blocks for admin back ends: tree helpers for parent/child records, JSON response envelopes, controller auto-binding, a service registry and a small WSGI server."
requires-python = ">=3.10"
dependencies = [
    "jinja2",
]
keywords = ["admin", "backend", "tree", "response", "router", "service-registry", "wsgi"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gfastkit = "gfastkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gfastkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
