[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysprobe"
version = "1.0.0"
description = "A small HTTP service that reports host CPU, memory, disk, network and node information as JSON."
requires-python = ">=3.10"
keywords = ["monitoring", "system", "host", "metrics", "http", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil>=5.9",
    "flask>=2.2",
    "pymongo>=4.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
sysprobe = "sysprobe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sysprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
