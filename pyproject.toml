[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "delivery"
version = "0.1.0"
description = "Delivery service groundwork: domain errors, map locations, .env configuration and a health-check HTTP server"
requires-python = ">=3.10"
keywords = ["delivery", "courier", "location", "health-check", "http", "dotenv"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
delivery = "delivery.app:main"

[tool.hatch.build.targets.wheel]
packages = ["delivery"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
