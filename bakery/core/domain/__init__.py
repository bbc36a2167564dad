"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Events: Domain events for communication
- Exceptions: Domain-specific error handling
"""

from bakery.core.domain.entities import AggregateRoot, Entity, generate_uuid
from bakery.core.domain.events import DomainEvent, DomainEventPublisher
from bakery.core.domain.exceptions import (
    BusinessRuleViolationException,
    ConcurrencyException,
    DiscountRejectedException,
    DomainException,
    EntityNotFoundException,
    InvalidTransitionException,
    NoPreviousStatusException,
    ValidationException,
)
from bakery.core.domain.value_objects import Money, StatusEnum, ValueObject, to_decimal

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "generate_uuid",
    # Value Objects
    "ValueObject",
    "Money",
    "StatusEnum",
    "to_decimal",
    # Events
    "DomainEvent",
    "DomainEventPublisher",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "BusinessRuleViolationException",
    "InvalidTransitionException",
    "NoPreviousStatusException",
    "DiscountRejectedException",
    "ConcurrencyException",
]
