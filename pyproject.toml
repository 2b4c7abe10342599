[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rescuekit"
version = "0.1.0"
description = "Disaster supply planning by recursive backtracking, with a map file parser, console demo and shift layout helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["backtracking", "dominating set", "graph", "disaster planning", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rescuekit-disaster = "rescuekit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["rescuekit"]

[tool.pytest.ini_options]
addopts = "-ra"
