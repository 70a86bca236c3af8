"""
AWS Health events reporter
"""

__version__ = "1.0.0"
