[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guardrules"
version = "0.1.0"
description = "Error types for a policy-as-code rules engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["policy", "rules", "errors", "guard"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["guardrules"]

[tool.pytest.ini_options]
addopts = "-ra"
