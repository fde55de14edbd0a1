"""
Shared constants, colors and helpers
"""
