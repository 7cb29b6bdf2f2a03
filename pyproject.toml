[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceshooter"
version = "0.1.0"
description = "A small vertical space shooter: move the ship, fire a bullet, repeat."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame", "memory-pool", "linked-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spaceshooter = "spaceshooter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceshooter"]

[tool.pytest.ini_options]
addopts = "-ra"
