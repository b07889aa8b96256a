[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zinf"
version = "0.1.0"
description = "A small grid-based action game: clear each level of monsters with your sword."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "action", "adventure", "pygame", "grid", "tiles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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
test = [
    "pytest",
]

[project.scripts]
zinf = "zinf.app:main"

[tool.hatch.build.targets.wheel]
packages = ["zinf"]

[tool.pytest.ini_options]
addopts = "-ra"
