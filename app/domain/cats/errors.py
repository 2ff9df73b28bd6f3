"""
Domain-specific errors for the cats bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class CatDomainError(Exception):
    """Base error for all cat domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class CatValidationError(CatDomainError):
    """Raised when cat data violates one or more field constraints.

    Attributes:
        errors: Mapping of field name to a human-readable reason.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        summary = "; ".join(f"{field}: {reason}" for field, reason in errors.items())
        super().__init__(f"Cat validation failed: {summary}")
        self.errors = dict(errors)


class CatNotFoundError(CatDomainError):
    """Raised when an operation targets a cat that does not exist."""

    def __init__(self, cat_id: str) -> None:
        super().__init__(f"Cat with ID {cat_id} not found")
        self.cat_id = cat_id


class CatConflictError(CatDomainError):
    """Raised when a cat name is already taken (case-insensitive)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Cat conflict: a cat named '{name}' already exists")
        self.name = name
