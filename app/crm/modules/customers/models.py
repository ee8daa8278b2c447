from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, replace
from typing import Any


class UnknownFieldError(KeyError):
    pass


# Form/API name -> attribute name. Order is the order fields are rendered.
EDITABLE_FIELDS: dict[str, str] = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "address": "address",
    "city": "city",
}

# Assigned by the API, carried in the shape but never edited on the form.
SERVER_FIELDS: dict[str, str] = {
    "id": "id",
    "createdAt": "created_at",
}

ALL_FIELDS: dict[str, str] = {**EDITABLE_FIELDS, **SERVER_FIELDS}


@dataclass(frozen=True)
class CustomerDraft:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    id: str = ""
    created_at: str = ""

    def with_field(self, name: str, value: str | None) -> "CustomerDraft":
        """Return a copy with one editable field (camelCase form name) replaced."""
        attr = EDITABLE_FIELDS.get(name)
        if attr is None:
            raise UnknownFieldError(name)
        return replace(self, **{attr: "" if value is None else str(value)})

    def to_payload(self) -> dict[str, str]:
        """JSON body for the customers API (camelCase keys, empty strings kept)."""
        values = asdict(self)
        return {key: values[attr] for key, attr in ALL_FIELDS.items()}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CustomerDraft":
        kwargs: dict[str, str] = {}
        for key, attr in ALL_FIELDS.items():
            if key in data:
                raw = data.get(key)
            elif attr in data:
                raw = data.get(attr)
            else:
                continue
            kwargs[attr] = "" if raw is None else str(raw)
        return cls(**kwargs)

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name.strip(), self.last_name.strip()) if p)
