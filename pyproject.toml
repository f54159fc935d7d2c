[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proptest"
version = "0.1.0"
description = "Property-based testing building blocks: generators, shrinkers and for-all properties"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "property-based testing", "quickcheck", "generators", "shrinking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["proptest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
