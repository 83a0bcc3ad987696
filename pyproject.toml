[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dotplan"
version = "0.1.0"
description = "Idempotent machine provisioning building blocks: atoms, steps, contexts and templated YAML/TOML manifests"
requires-python = ">=3.11"
keywords = ["provisioning", "dotfiles", "configuration-management", "manifests", "idempotent"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "pyyaml>=6.0",
    "jinja2>=3.1",
    "platformdirs>=3.0",
    "dnspython>=2.3",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
]

[tool.hatch.build.targets.wheel]
packages = ["dotplan"]

[tool.hatch.build.targets.sdist]
include = ["dotplan", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
ignore_missing_imports = true
