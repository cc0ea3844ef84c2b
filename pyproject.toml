[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ent"
version = "0.1.0"
description = "Command-line tool for package recipe trees: upstream update checks and build listings"
requires-python = ">=3.10"
keywords = ["recipes", "packaging", "updates", "release-monitoring", "builds", "cve"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "pyyaml>=6.0",
    "httpx>=0.27",
    "semver>=3.0",
    "termcolor>=2.4",
    "tqdm>=4.66",
]

[project.optional-dependencies]
test = [
    "pytest>=8.0",
    "pytest-asyncio>=0.23",
    "respx>=0.21",
]

[project.scripts]
ent = "ent.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ent"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
