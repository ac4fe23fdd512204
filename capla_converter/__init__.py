"""
Capla USD -> DOP converter
Fee-adjusted conversion helper for a launcher-style UI
"""

__version__ = "1.0.0"
