"""Example editing sessions for isotile.

This package demonstrates library usage but is not part of the core API.
"""
