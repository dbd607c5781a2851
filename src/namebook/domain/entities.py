"""Domain entity: Record (one name + phone pair)."""

from dataclasses import dataclass

# Interactive add/edit requires at least this many digits. Batch import does not.
PHONE_MIN_DIGITS = 7


def is_digits(value: str) -> bool:
    """True if value is non-empty and made only of ASCII digits."""
    return bool(value) and all("0" <= ch <= "9" for ch in value)


@dataclass(frozen=True)
class Record:
    """
    A validated (name, phone) pair.
    Records have no identity beyond their phone: no two records in a collection share one.
    """

    name: str
    phone: str

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Record name must be non-empty.")
        if not is_digits(self.phone):
            raise ValueError("Record phone must be a non-empty string of digits.")

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "phone": self.phone}
