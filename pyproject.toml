[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "physsims"
version = "1.0.0"
description = "Small classical-mechanics simulations that write their trajectories to plain-text data tables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "physics",
    "simulation",
    "kinematics",
    "projectile",
    "pendulum",
    "lissajous",
    "particle-in-a-box",
    "minigolf",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
physsims = "physsims.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["physsims"]

[tool.pytest.ini_options]
addopts = "-ra"
