[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mp4scan"
version = "0.1.0"
description = "Walk the box structure of MP4/QuickTime files and print what each header box holds"
requires-python = ">=3.10"
dependencies = []
keywords = ["mp4", "quicktime", "isobmff", "atoms", "boxes", "video", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mp4scan = "mp4scan.cli:main"
mp4scan-tui = "mp4scan.tui:main"

[tool.hatch.build.targets.wheel]
packages = ["mp4scan"]

[tool.hatch.build.targets.sdist]
include = ["mp4scan", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["mp4scan"]
