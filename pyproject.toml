[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atomhabits"
version = "0.1.0"
description = "Atom is a habit tracking application: an HTTP API over a PostgREST habit table"
requires-python = ">=3.10"
keywords = ["habits", "habit-tracking", "postgrest", "supabase", "rest-api", "starlette"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "httpx>=0.24",
    "starlette>=0.27",
    "uvicorn>=0.22",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "pytest-asyncio>=0.21",
    "respx>=0.20",
    "httpx>=0.24",
]

[project.scripts]
atomhabits = "atomhabits.app:main"

[tool.hatch.build.targets.wheel]
packages = ["atomhabits"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
