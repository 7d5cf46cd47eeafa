[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "citygrid"
version = "0.1.0"
description = "City services on a shared graph of stops and places: facilities, hospitals, airports, buses and emergency vehicles"
requires-python = ">=3.10"
dependencies = []
keywords = ["city", "graph", "routing", "shortest-path", "emergency", "gis", "haversine"]
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
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["citygrid"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
