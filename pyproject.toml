[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bhswz"
version = "0.1.0"
description = "Read and write Brawlhalla SWZ archives"
requires-python = ">=3.10"
dependencies = []
keywords = ["brawlhalla", "swz", "archive", "zlib"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bhswz = "bhswz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bhswz"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
