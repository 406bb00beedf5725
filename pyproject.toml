[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sniptor"
version = "0.1.0"
description = "Syntax trees, a symbol table and semantic checks for the Sniptor teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ast", "symbol-table", "semantic-analysis", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sniptor-build = "sniptor.builder:main"
sniptor-demo = "sniptor.structured_ast:main"

[tool.hatch.build.targets.wheel]
packages = ["sniptor"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
