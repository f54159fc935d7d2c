"""Property-based testing: generators, shrinkers and property results."""

__version__ = "0.1.0"