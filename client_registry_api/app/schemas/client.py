"""
Pydantic schema for client records.

A client is an ``(id, name)`` pair.  Both fields are decoded strictly:
``id`` must be a JSON integer that fits in 64 bits and ``name`` a JSON
string, so bodies such as ``{"id": "4"}`` or ``{"id": 4.5}`` are
rejected.  Keys are matched case‑insensitively (``{"ID": 4}`` sets
``id``) with an exact match taking precedence.  A field that is left
out or ``null`` takes its zero value, and unknown fields are ignored.
The ``id`` is not required to be unique across the collection.
"""

from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr, model_validator

MIN_CLIENT_ID = -(2**63)
MAX_CLIENT_ID = 2**63 - 1


class Client(BaseModel):
    """Schema used both for request bodies and responses."""

    id: StrictInt = Field(
        0,
        ge=MIN_CLIENT_ID,
        le=MAX_CLIENT_ID,
        examples=[1],
        description="Caller‑supplied identifier",
    )
    name: StrictStr = Field("", examples=["Client 1"])

    model_config = {
        "from_attributes": True,
        "extra": "ignore",
    }

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        values = {}
        for field in cls.model_fields:
            if field in data:
                values[field] = data[field]
                continue
            for key, value in data.items():
                if isinstance(key, str) and key.lower() == field:
                    values[field] = value
                    break
        # null leaves the zero value in place
        return {k: v for k, v in values.items() if v is not None}
