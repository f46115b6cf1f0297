[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "longvinter"
version = "0.1.0"
description = "Gameplay rules for a survival role-playing game: items, inventory, crafting, equipment, decorations, chat networking and HUD state."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "inventory", "crafting", "survival", "chat"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["longvinter"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
