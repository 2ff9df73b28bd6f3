"""
Infrastructure adapters for the cats bounded context.

Each adapter implements a domain port (ABC).
"""
