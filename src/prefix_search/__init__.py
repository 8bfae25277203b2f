"""
Prefix Search - Core Package

Finds files whose names start with one of several search terms across
named groups of directories ("categories") and prints the matches with
the matched prefix highlighted.
"""

__version__ = "0.1.0"
