"""
Domain layer package.

Cat entities, the field constraints every validation stage shares,
domain errors, and the repository port. Pure Python: no framework
imports and no IO.
"""
