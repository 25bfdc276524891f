"""DevExtreme Vue wrapper generator.

Turns widget metadata into Vue component sources.
"""

__version__ = "0.1.0"
