# modern_timeline/result.py
"""Query result holders consumed by the timeline pipeline."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .exceptions import MalformedResultError

DATE_TYPE_ID = "_dat"
PAGE_TYPE_ID = "_wpg"
TEXT_TYPE_ID = "_txt"

FILE_NAMESPACE = 6


@dataclass(frozen=True)
class Page:
    """Identity of a wiki page a query row is about."""

    title: str
    namespace: int = 0

    @property
    def display_title(self) -> str:
        return self.title.replace("_", " ")

    @property
    def prefixed_title(self) -> str:
        if self.namespace == FILE_NAMESPACE:
            return f"File:{self.display_title}"
        return self.display_title


@dataclass(frozen=True)
class PrintRequest:
    """Property descriptor of a query column: its label and declared type."""

    label: str
    type_id: str = TEXT_TYPE_ID

    @property
    def is_date(self) -> bool:
        return self.type_id == DATE_TYPE_ID


@dataclass(frozen=True)
class PropertyValueCollection:
    property: PrintRequest
    values: Tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def label(self) -> str:
        return self.property.label

    def is_empty(self) -> bool:
        return not self.values

    def first_value(self):
        return self.values[0] if self.values else None


@dataclass(frozen=True)
class Subject:
    page: Page
    property_values: Tuple[PropertyValueCollection, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "property_values", tuple(self.property_values))

    def get_collection(self, label: str) -> Optional[PropertyValueCollection]:
        """Return the first collection with the given label, if any."""
        for collection in self.property_values:
            if collection.label == label:
                return collection
        return None


@dataclass(frozen=True)
class SubjectCollection:
    subjects: Tuple[Subject, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "subjects", tuple(self.subjects))

    def __iter__(self) -> Iterator[Subject]:
        return iter(self.subjects)

    def __len__(self) -> int:
        return len(self.subjects)


def _parse_page(raw) -> Page:
    if isinstance(raw, str) and raw.strip():
        if raw.startswith("File:"):
            return Page(raw[len("File:"):], FILE_NAMESPACE)
        return Page(raw)
    if isinstance(raw, dict) and raw.get("title"):
        try:
            namespace = int(raw.get("namespace", 0))
        except (TypeError, ValueError):
            raise MalformedResultError(
                "Page namespace is not a number", details={"page": repr(raw)}
            ) from None
        return Page(raw["title"], namespace)
    raise MalformedResultError("Query row has no page", details={"page": repr(raw)})


def _parse_collection(prop) -> PropertyValueCollection:
    if not isinstance(prop, dict):
        raise MalformedResultError("Property is not an object", details={"property": repr(prop)})

    label = prop.get("label", "")
    type_id = prop.get("type", TEXT_TYPE_ID)
    values = prop.get("values", [])
    if values is None:
        values = []
    elif not isinstance(values, list):
        values = [values]
    if type_id == PAGE_TYPE_ID:
        values = [_parse_page(v) for v in values]
    return PropertyValueCollection(PrintRequest(label, type_id), values)


def parse_rows_to_subjects(rows: List[Dict]) -> SubjectCollection:
    """Build a SubjectCollection from exported query result rows.

    Each row looks like::

        {"page": "Some Page",
         "properties": [{"label": "Has date", "type": "_dat", "values": ["2019-08-02"]}]}

    where ``page`` may also be ``{"title": ..., "namespace": ...}``. Values of
    page-typed properties are read the same way.
    """
    if not isinstance(rows, list):
        raise MalformedResultError("Query results are not a list", details={"rows": type(rows).__name__})

    subjects = []

    for row in rows:
        if not isinstance(row, dict):
            raise MalformedResultError("Query row is not an object", details={"row": repr(row)})

        page = _parse_page(row.get("page"))
        properties = row.get("properties", [])
        if not isinstance(properties, list):
            raise MalformedResultError(
                "Row properties are not a list", details={"page": page.title}
            )

        subjects.append(Subject(page, [_parse_collection(prop) for prop in properties]))

    return SubjectCollection(subjects)
