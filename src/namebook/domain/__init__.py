"""Domain layer: entities and value objects. No dependencies on outer layers."""

from namebook.domain.entities import PHONE_MIN_DIGITS, Record, is_digits

__all__ = ["PHONE_MIN_DIGITS", "Record", "is_digits"]
