[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liliumtools"
version = "0.1.0"
description = "Small command-line tools (a minimal shell, arch, uname, true and false) and the helpers they share"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "uname", "arch", "true", "false", "command-line", "tools"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minish = "liliumtools.minish:main"
lilium-arch = "liliumtools.archinfo:main"
lilium-uname = "liliumtools.uname:main"
lilium-true = "liliumtools.truefalse:true_main"
lilium-false = "liliumtools.truefalse:false_main"

[tool.hatch.build.targets.wheel]
packages = ["liliumtools"]

[tool.hatch.build.targets.sdist]
include = ["liliumtools", "tests", "README.md", "pyproject.toml"]

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
warn_unused_ignores = true
warn_redundant_casts = true
