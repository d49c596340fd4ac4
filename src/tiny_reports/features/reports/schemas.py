"""Report Pipeline Schemas

This module defines the Pydantic models that flow through the report
pipeline:

1. Item - an immutable input record (id, name, value)
2. AnnotatedItem - a visible item, optionally flagged as priority
3. User - the viewer the report is generated for
4. ReportType - the closed set of recognized output formats
5. ReportRequest - the request payload accepted by the API and CLI
6. ReportOutcome - the rendered report plus how it was produced

Item and user fields are permissive: a missing field is carried through as
None and rendered as empty text, and a malformed one (a numeric name, a
textual value) is rendered as-is instead of failing validation. Only real
numbers take part in visibility checks and totals."""
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float, Decimal]


def numeric_value(value) -> Optional[Number]:
    """Returns value if it is a real number, otherwise None (bools, text and Decimal NaN do not count)."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    if isinstance(value, Decimal) and value.is_nan():
        return None
    return value


class ReportType(str, Enum):
    CSV = "CSV"
    HTML = "HTML"


class Visibility(str, Enum):
    FULL = "full"
    LIMITED = "limited"
    DENIED = "denied"


class ReportFormat(str, Enum):
    CSV = "csv"
    HTML = "html"
    UNSUPPORTED = "unsupported"


class Item(BaseModel):
    id: Any = Field(None, description="Opaque item identifier")
    name: Any = Field(None, description="Display name of the item")
    value: Any = Field(None, description="Numeric amount; non-numeric input is rendered but never counted")

    model_config = ConfigDict(frozen=True)


class AnnotatedItem(Item):
    priority: bool = Field(False, description="High-value item flagged for an administrative viewer")

    @classmethod
    def from_item(cls, item: Item, priority: bool = False) -> "AnnotatedItem":
        """Builds a new record from an item's fields; the source item is left untouched."""
        return cls(id=item.id, name=item.name, value=item.value, priority=priority)


class User(BaseModel):
    name: Any = Field(None, description="Display name embedded in the report")
    role: Any = Field(None, description="Role identifier, e.g. ADMIN or USER")

    model_config = ConfigDict(frozen=True)


class ReportRequest(BaseModel):
    report_type: Any = Field(..., description="Output format, CSV or HTML")
    user: User
    items: List[Item] = Field(default_factory=list)


class ReportOutcome(BaseModel):
    content: str
    visibility: Visibility
    report_format: ReportFormat
    item_count: int
    total: Number

    @property
    def is_empty(self) -> bool:
        return self.content == ""
