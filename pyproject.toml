[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smokesignal"
version = "1.0.2"
description = "Building blocks for an event and RSVP web application: message bundles, language negotiation, pagination, URLs, time zones, templates and OAuth client metadata."
requires-python = ">=3.10"
keywords = ["events", "rsvp", "calendar", "atproto", "oauth", "i18n", "pagination"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "jinja2",
    "pytz",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["smokesignal"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
