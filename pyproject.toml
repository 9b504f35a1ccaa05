[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ultrakit"
version = "0.1.0"
description = "Fixed-width integer arithmetic, a printf formatter, message queues, timers, buffer regions, sprite state and small game-state models."
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "message-queue", "timers", "buffer-pool", "sprites", "fixed-width-arithmetic"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ultrakit"]

[tool.pytest.ini_options]
addopts = "-ra"
