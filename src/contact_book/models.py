from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Tuple

NAME_LIMIT = 16
FIELD_NAMES: Tuple[str, ...] = ("given_name", "family_name", "phone", "email")
_TRUNCATED_FIELDS = frozenset({"given_name", "family_name"})


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(slots=True, eq=False)
class Contact:
    """
    One contact entry.

    Names are cut to ``NAME_LIMIT`` characters on every assignment, including
    the constructor and ``dataclasses.replace``, so stored values always obey
    the limit. ``None`` is stored as the empty string.

    Two contacts are equal when their given and family names match
    case-insensitively; phone and email do not take part in equality.
    """
    given_name: str = ""
    family_name: str = ""
    phone: str = ""
    email: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        value = "" if value is None else str(value)
        if name in _TRUNCATED_FIELDS:
            value = value[:NAME_LIMIT]
        # slots=True rebuilds the class, so zero-arg super() is unavailable.
        object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Contact):
            return NotImplemented
        return (
            self.given_name.lower() == other.given_name.lower()
            and self.family_name.lower() == other.family_name.lower()
        )

    def __hash__(self) -> int:
        return hash((self.given_name.lower(), self.family_name.lower()))

    def __str__(self) -> str:
        return f"{self.given_name} {self.family_name} | Tel: {self.phone} | Email: {self.email}"

    def is_addable(self) -> bool:
        """At least one way to reach the person: phone or email."""
        return not (is_blank(self.phone) and is_blank(self.email))

    def is_valid_after_edit(self) -> bool:
        return self.is_addable() and not (
            is_blank(self.given_name) and is_blank(self.family_name)
        )

    def with_changes(self, **changes: Any) -> "Contact":
        """Return a new contact; the original is left untouched."""
        return replace(self, **changes)

    def as_tuple(self) -> Tuple[str, str, str, str]:
        return tuple(getattr(self, f.name) for f in fields(self))  # type: ignore[return-value]
