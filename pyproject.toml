[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feeengine"
version = "0.1.0"
description = "A small maker/taker fee engine with a WSGI health endpoint, an upper-casing CLI and wei/ether helpers"
requires-python = ">=3.10"
keywords = ["fees", "basis points", "trading", "maker", "taker", "wei", "ether", "wsgi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Typing :: Typed",
]
dependencies = [
    "cryptography",
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
feeengine-cli = "feeengine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["feeengine"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
