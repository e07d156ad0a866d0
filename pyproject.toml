[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pillarsofself"
version = "0.1.0"
description = "The 7 Pillars of Self: a small reflective journey game with a lightweight entity/scene toolkit"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "game",
    "pygame",
    "wellbeing",
    "emotional-fitness",
    "entity-component-system",
    "scene",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pillars-of-self = "pillarsofself.pillars_view:main"
pillars-of-self-menu = "pillarsofself.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pillarsofself"]

[tool.hatch.build.targets.sdist]
include = [
    "pillarsofself",
    "tests",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
