"""
Validation limits and messages for the cats bounded context.

Centralizes every magic number so the Pydantic schemas and the
domain rules enforce exactly the same constraints.
"""

import re

NAME_MIN_LEN = 1
NAME_MAX_LEN = 50
NAME_PATTERN = r"^[a-zA-Z\s\-']+$"
NAME_REGEX = re.compile(NAME_PATTERN)

AGE_MIN = 0
AGE_MAX = 30

BREED_MIN_LEN = 1
BREED_MAX_LEN = 30

COLOR_MIN_LEN = 1
COLOR_MAX_LEN = 20

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

NAME_REQUIRED = "Cat name is required"
NAME_TOO_LONG = f"Cat name must be {NAME_MAX_LEN} characters or less"
NAME_INVALID_CHARS = "Cat name contains invalid characters"
AGE_NOT_INTEGER = "Cat age must be an integer"
AGE_NEGATIVE = "Cat age cannot be negative"
AGE_TOO_HIGH = f"Cat age cannot exceed {AGE_MAX} years"
BREED_REQUIRED = "Cat breed is required"
BREED_TOO_LONG = f"Cat breed must be {BREED_MAX_LEN} characters or less"
COLOR_REQUIRED = "Cat color is required"
COLOR_TOO_LONG = f"Cat color must be {COLOR_MAX_LEN} characters or less"
ADOPTED_NOT_BOOLEAN = "Adoption status must be a boolean"
INVALID_ID = "Invalid cat ID format"
PAGE_NOT_POSITIVE = "Page must be a positive number"
LIMIT_OUT_OF_RANGE = f"Limit must be between 1 and {MAX_LIMIT}"
