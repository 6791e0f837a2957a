[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "layouttutor"
version = "0.1.0"
description = "A terminal typing tutor for learning new keyboard layouts such as Colemak"
requires-python = ">=3.10"
keywords = ["typing", "tutor", "keyboard", "layout", "colemak", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
layouttutor = "layouttutor.app:main"

[tool.hatch.build.targets.wheel]
packages = ["layouttutor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
