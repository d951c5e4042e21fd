"""Record value type flowing from a data source to a data sink."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import AcquisitionError


@dataclass(frozen=True)
class Record:
    """A person record.

    Attributes:
        name: Display name.
        age: Age in whole years.
    """

    name: str
    age: int

    @classmethod
    def from_payload(cls, payload: Any) -> Record:
        """Build a Record from a decoded JSON value.

        Field names are matched case-insensitively; when two keys differ only
        by case the first one in payload order wins. Unknown fields are
        ignored.

        Args:
            payload: Decoded JSON, expected to be an object.

        Returns:
            Record with the payload's name and age.

        Raises:
            AcquisitionError: If the payload is not an object, a field is
                missing, `name` is not a string or `age` is not an integer.
        """
        if not isinstance(payload, Mapping):
            raise AcquisitionError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )

        fields: dict[str, Any] = {}
        for key, value in payload.items():
            if isinstance(key, str):
                fields.setdefault(key.lower(), value)

        missing = [f for f in ("name", "age") if f not in fields]
        if missing:
            raise AcquisitionError(f"Payload missing required fields: {missing}")

        name = fields["name"]
        age = fields["age"]
        if not isinstance(name, str):
            raise AcquisitionError(
                f"Field 'name' must be a string, got {type(name).__name__}"
            )
        # bool is an int subclass; JSON true/false is not an age
        if isinstance(age, bool) or not isinstance(age, int):
            raise AcquisitionError(
                f"Field 'age' must be an integer, got {type(age).__name__}"
            )
        return cls(name=name, age=age)

    def to_lines(self) -> list[str]:
        """Render the record as `key=value` lines, name first."""
        return [f"name={self.name}", f"age={self.age}"]
