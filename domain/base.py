import re
from typing import Annotated, Any

from pydantic import (
    AfterValidator, AwareDatetime, BaseModel, ConfigDict,
    StrictStr, TypeAdapter, ValidationError, model_validator
)

# Entity ids are unsigned 64-bit
MAX_ENTITY_ID = 2**64 - 1

# RFC 3339 date-time: "T" separator, seconds, optional fraction, "Z" or a numeric offset
_RFC3339 = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})")
_aware_datetime = TypeAdapter(AwareDatetime)


def check_timestamp(value: str) -> str:
    """
    Accepts an RFC 3339 timestamp and returns it unchanged, so stored records
    keep their original precision and offset.
    """
    if not _RFC3339.fullmatch(value):
        raise ValueError(f"not an RFC 3339 timestamp: {value!r}")
    try:
        _aware_datetime.validate_python(value)
    except ValidationError:
        raise ValueError(f"invalid timestamp: {value!r}")
    return value


Timestamp = Annotated[StrictStr, AfterValidator(check_timestamp)]


class Entity(BaseModel):
    """
    Base for stored records.

    Payload keys are matched against the field aliases case-insensitively,
    so "id", "ID" and "Id" all populate the same field. When several keys
    map to one field the last one wins. Fields are only reachable through
    their aliases.
    """
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def match_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        aliases = {
            (field.alias or name).lower(): field.alias or name
            for name, field in cls.model_fields.items()
        }
        matched = {}
        for key, value in data.items():
            alias = aliases.get(key.lower()) if isinstance(key, str) else None
            matched[alias or key] = value
        return matched

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
