"""Generators for numbers, strings, collections and times, and their shrinkers."""