"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. Storage backends live here.
"""
