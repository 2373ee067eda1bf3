[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coroflow"
version = "0.1.0"
description = "Lazy coroutine tasks, a FIFO thread pool, coroutine synchronization primitives and socket helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "coroutine",
    "task",
    "thread-pool",
    "event",
    "latch",
    "mutex",
    "semaphore",
    "concurrency",
    "socket",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coroflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
