"""
Design (models.py)
- Purpose: Define the Shop record and convert it to/from table rows.
- Inputs: Field values, or row dicts as returned by the hosted table.
- Outputs: Dataclass instances; insert payload dicts.
- Side effects: None.
- Thread-safety: Shop is frozen; instances can be shared between threads.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from .config import VALIDATION_NOTICE
from .errors import InvalidInput


@dataclass(frozen=True)
class Shop:
    """
    Design (Shop)
    - Purpose: One row of the Shops table: a named item with a favorite color.
    - Fields:
        name: display name (non-empty when submitted).
        favorite_color: CSS-style color value (e.g. "#ff0000", "blue").
        id: assigned by the store on insert; None until then.
        created_at: assigned by the store on insert; used for newest-first ordering.
    """
    name: str
    favorite_color: str
    id: int | None = None
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Shop":
        """
        Purpose: Build a Shop from a table row (column names: id, name, favorite_color, created_at).
        Raises: ValueError if the row is not a mapping or has no name.
        """
        if not isinstance(row, Mapping):
            raise ValueError(f"Expected a row mapping, got {type(row).__name__}")
        name = row.get("name")
        if name is None:
            raise ValueError("Row has no 'name' column")
        raw_id = row.get("id")
        return cls(
            name=str(name),
            favorite_color=str(row.get("favorite_color") or ""),
            id=int(raw_id) if raw_id is not None else None,
            created_at=parse_timestamp(row.get("created_at")),
        )

    def to_insert_row(self) -> dict[str, str]:
        """Payload for an insert; id and created_at are left to the store."""
        return {"name": self.name, "favorite_color": self.favorite_color}


def parse_timestamp(value: Any) -> datetime | None:
    """
    Purpose: Parse an ISO-8601 timestamp as stored in created_at.
    Inputs: str (a trailing 'Z' is accepted), datetime, or None/blank.
    Outputs: datetime or None.
    Raises: ValueError for non-empty strings that are not ISO-8601.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def validate_shop_input(name: str | None, color: str | None) -> tuple[str, str]:
    """Trim both fields; raise InvalidInput if either ends up empty."""
    name = (name or "").strip()
    color = (color or "").strip()
    if not name or not color:
        raise InvalidInput(VALIDATION_NOTICE)
    return name, color
