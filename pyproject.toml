[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixsdk"
version = "2.0.0"
description = "Client-side helpers for XuperChain-style blockchains: accounts, address conversion, configuration, ACLs, event filters, request options and a client for a remote signing service."
requires-python = ">=3.10"
keywords = ["blockchain", "xuperchain", "sdk", "account", "evm", "sgx", "acl"]
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
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["matrixsdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
