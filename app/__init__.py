"""
Cat Management API.

Application package root. This is a small modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - cats: Create, read, update, delete and list cats.

Layers:
    - domain: Pure business logic, entities, field rules, ports (ABCs), errors.
    - application: The cat service and its DTOs.
    - infrastructure: Adapters (in-memory storage) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
