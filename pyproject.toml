[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankwars"
version = "0.1.0"
description = "Simulation core of a 2D artillery tank game: deformable terrain, tanks, enemy AI, projectiles and fireworks"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game", "artillery", "tanks", "terrain", "2d", "transforms", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["tankwars"]

[tool.pytest.ini_options]
addopts = "-ra"
