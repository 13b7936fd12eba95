[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paperdesk"
version = "0.1.0"
description = "A document-checking desk game: spot forged names, dates, stamps and photos before the timer runs out."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "documents", "inspection", "forgery"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
paperdesk = "paperdesk.game:main"

[tool.hatch.build.targets.wheel]
packages = ["paperdesk"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
