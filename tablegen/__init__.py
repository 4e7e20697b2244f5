"""
Interactive multiplication table generator
"""

__version__ = "1.0.0"
