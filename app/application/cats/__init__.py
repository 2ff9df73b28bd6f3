"""
Application layer for the cats bounded context.

The cat service coordinates domain rules and the repository port
to fulfill business operations. No framework or infrastructure imports allowed.
"""
