"""
Blue Horizon water-quality monitoring API
"""

__version__ = "1.0.0"
