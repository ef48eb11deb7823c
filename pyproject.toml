[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagetrace"
version = "0.1.0"
description = "Multi-level page table simulator driven by binary memory address traces"
requires-python = ">=3.10"
dependencies = []
keywords = ["page table", "virtual memory", "address trace", "operating systems", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pagetrace = "pagetrace.cli:main"
tracereader = "pagetrace.tracereader:main"

[tool.hatch.build.targets.wheel]
packages = ["pagetrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
