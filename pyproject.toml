[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "peerswap"
version = "0.1.0"
description = "Helpers for peer-to-peer Lightning channel swaps: preimages, multi-part payment splitting, peer statistics, short channel ids and daemon start-up checks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "lightning",
    "bitcoin",
    "liquid",
    "swap",
    "preimage",
    "short-channel-id",
    "multi-part-payment",
]
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
    "Topic :: Internet",
    "Topic :: Office/Business :: Financial",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["peerswap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
