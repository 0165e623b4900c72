"""
HTML tag balance checker: extraction, nesting validation, CLI and API.
"""

__version__ = "0.1.0"
