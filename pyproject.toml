[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pulsar_agent"
version = "0.1.0"
description = "Building blocks for an eBPF-based runtime monitoring agent: event types, shared buffers, procfs helpers, syscall tables and a local control API over a Unix socket."
requires-python = ">=3.10"
dependencies = [
    "aiohttp",
]
keywords = ["ebpf", "bpf", "monitoring", "security", "procfs", "syscalls", "linux"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: System :: Monitoring",
    "Topic :: Security",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["pulsar_agent"]

[tool.hatch.build.targets.sdist]
include = ["pulsar_agent", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
