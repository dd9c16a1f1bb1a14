[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aicoder"
version = "0.1.0"
description = "Command-line tool that scaffolds new code from a prompt or refactors existing code with an AI chat model"
requires-python = ">=3.10"
keywords = ["ai", "code generation", "refactoring", "scaffolding", "openai", "azure", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Quality Assurance",
]
dependencies = [
    "requests",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
aicoder = "aicoder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aicoder"]

[tool.pytest.ini_options]
addopts = "-ra"
