from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    ResourceNotFoundException,
)

__all__ = [
    "BusinessRuleViolationException",
    "DomainException",
    "DuplicateResourceException",
    "ResourceNotFoundException",
]
