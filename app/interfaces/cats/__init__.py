"""
HTTP interface for the cats bounded context.
"""
