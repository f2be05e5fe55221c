# modern_timeline/presenter.py
"""Slide presenters turn an Event into the text and media shown for it."""

import html
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol

from .model import Event
from .result import Page, PropertyValueCollection, Subject
from .temporal import TimeValue

TitleResolver = Callable[[Page], str]
FileUrlResolver = Callable[[str], str]


@dataclass(frozen=True)
class Slide:
    headline: str
    body: Optional[str] = None
    media: Optional[Dict[str, str]] = None


class SlidePresenter(Protocol):
    def present(self, event: Event) -> Slide:
        ...


def format_value(value) -> str:
    """Plain text rendering of a single raw property value."""
    if isinstance(value, Page):
        return value.prefixed_title
    if isinstance(value, TimeValue):
        text = f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        if (value.hour, value.minute, value.second) != (0, 0, 0):
            text += f" {value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        return text
    return str(value)


def _escaped_values(collection: PropertyValueCollection) -> str:
    return ", ".join(html.escape(format_value(v)) for v in collection.values)


def _default_title(page: Page) -> str:
    return page.display_title


def _file_name(value) -> str:
    name = value.title if isinstance(value, Page) else str(value)
    if name.startswith("File:"):
        name = name[len("File:"):]
    return name.strip()


class SimpleSlidePresenter:
    """Uses the page title as headline and lists the other property values."""

    def __init__(
        self,
        title_resolver: Optional[TitleResolver] = None,
        image_property: Optional[str] = None,
        file_url_resolver: Optional[FileUrlResolver] = None,
    ):
        self.title_resolver = title_resolver or _default_title
        self.image_property = image_property
        self.file_url_resolver = file_url_resolver or (lambda name: name)

    def present(self, event: Event) -> Slide:
        return Slide(
            headline=self.title_resolver(event.subject.page),
            body=self.get_body(event),
            media=self.get_media(event.subject),
        )

    def get_body(self, event: Event) -> Optional[str]:
        lines = [
            f"{html.escape(c.label)}: {_escaped_values(c)}"
            for c in self._text_collections(event.subject)
        ]
        return "<br>".join(lines) if lines else None

    def get_media(self, subject: Subject) -> Optional[Dict[str, str]]:
        if not self.image_property:
            return None
        collection = subject.get_collection(self.image_property)
        if collection is None or collection.is_empty():
            return None
        name = _file_name(collection.first_value())
        if not name:
            return None
        url = self.file_url_resolver(name)
        return {"url": url, "thumbnail": url} if url else None

    def _text_collections(self, subject: Subject) -> List[PropertyValueCollection]:
        return [
            c for c in subject.property_values
            if not c.property.is_date and not c.is_empty() and c.label != self.image_property
        ]


class _BlankingDict(dict):
    def __missing__(self, key):
        return ""


class TemplateSlidePresenter(SimpleSlidePresenter):
    """Renders the slide body from a format template.

    ``{page}`` is the display title of the subject; every property label is
    available as a placeholder holding its comma separated values. Unknown
    placeholders render as empty strings.
    """

    def __init__(self, template: str, **kwargs):
        super().__init__(**kwargs)
        self.template = template

    def get_body(self, event: Event) -> Optional[str]:
        params = _BlankingDict(page=html.escape(self.title_resolver(event.subject.page)))
        for collection in event.subject.property_values:
            if collection.label not in params:
                params[collection.label] = _escaped_values(collection)
        body = self.template.format_map(params)
        return body or None
