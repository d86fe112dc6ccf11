[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geffe"
version = "0.1.0"
description = "Geffe keystream generator built on three LFSRs, with a correlation attack that recovers its registers"
requires-python = ">=3.10"
dependencies = []
keywords = ["geffe", "lfsr", "stream cipher", "correlation attack", "cryptanalysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
geffe-generator = "geffe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["geffe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
