"""
Domain layer of the cats bounded context.

This module contains all domain logic for cat management:
- The Cat entity and its create/update/query shapes
- Field constraints shared by every validation stage
- Domain errors and the repository port
"""
