"""Example clients for unistate.

This package demonstrates library usage but is not part of the core API.
"""
