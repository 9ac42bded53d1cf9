[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small design-pattern building blocks: a user and group registry with a shell, type lists and maps, comparison and counting mixins, a bounded event log, report builders, an adaptive integer set and shared expression trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "builder",
    "bridge",
    "flyweight",
    "singleton",
    "mixin",
    "registry",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-users = "patternkit.cli:main"
patternkit-log-demo = "patternkit.log:main"
patternkit-checkpoints = "patternkit.checkpoints:main"
patternkit-set-demo = "patternkit.adaptive_set:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.hatch.build.targets.sdist]
include = ["patternkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
