[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ajisai"
version = "0.1.0"
description = "Workspace configuration handling and rule/prompt conversion for Cursor, Windsurf and GitHub Copilot"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["ai", "agent", "presets", "cursor", "windsurf", "copilot", "rules", "prompts", "front-matter"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ajisai"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
