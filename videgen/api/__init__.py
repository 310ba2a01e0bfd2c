"""
HTTP API for the videgen pipeline.
"""
