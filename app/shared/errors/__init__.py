"""
Error handling package.

Maps cat domain errors and request validation failures to
HTTP status codes and a single JSON error body shape.
"""
