"""
Shared helpers: default random source, console I/O and logging setup.
"""
