"""
py-drills: small console exercises built around a seeded random source.
"""

__version__ = "0.1.0"
