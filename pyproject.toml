[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enkastela"
version = "0.1.0"
description = "Building blocks for application-level field encryption: blind-index normalisation, Bloom-filter search, access policies, compliance reports and stored ciphertext values."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "encryption",
    "field-encryption",
    "blind-index",
    "bloom-filter",
    "access-control",
    "gdpr",
    "compliance",
]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["enkastela"]

[tool.hatch.build.targets.sdist]
include = ["enkastela", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
