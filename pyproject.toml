[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bnmodular"
version = "0.1.0"
description = "Limb-column arithmetic and divisibility constraints for the BN254 base field over Goldilocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["bn254", "goldilocks", "stark", "modular arithmetic", "constraints", "zero knowledge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bnmodular"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
