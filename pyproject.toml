[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lockedstructs"
version = "2024.1"
description = "Thread-safe account, blocking list and bucket-locked hash table"
requires-python = ">=3.10"
dependencies = []
keywords = ["threading", "locks", "mutex", "concurrency", "producer-consumer", "hash table"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["lockedstructs"]

[tool.pytest.ini_options]
addopts = "-ra"
