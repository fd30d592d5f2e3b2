[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "suikit"
version = "0.1.0"
description = "Client toolkit for the Sui blockchain: BCS encoding, signatures, key pairs and JSON-RPC models"
requires-python = ">=3.10"
keywords = ["sui", "blockchain", "bcs", "json-rpc", "ed25519", "websocket"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]
dependencies = [
    "cryptography",
    "httpx",
    "websocket-client",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["suikit"]

[tool.hatch.build.targets.sdist]
include = ["suikit", "tests"]

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
