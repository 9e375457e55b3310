[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "usracc"
version = "0.1.0"
description = "Building blocks for a user-access gateway: message framing, BCD number encoding, message rings, timers, block pools and worker threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["telephony", "sms", "bcd", "gateway", "message-queue", "framing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Telephony",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["usracc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
