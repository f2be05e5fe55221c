# modern_timeline/model.py
import logging
from dataclasses import dataclass
from typing import List, Optional

from .result import PropertyValueCollection, Subject
from .temporal import TimeValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """A subject placed on the timeline by its start and optional end date"""

    subject: Subject
    start_date: TimeValue
    end_date: Optional[TimeValue] = None


class EventExtractor:
    """Finds the start and end date of a subject among its property values.

    Date collections are recognised by their declared date type. When
    ``start_label`` or ``end_label`` is set, a non-empty collection with that
    label takes the role regardless of its type; the remaining date-typed
    collections fill the open roles in scan order.
    """

    def __init__(self, start_label: Optional[str] = None, end_label: Optional[str] = None):
        self.start_label = start_label
        self.end_label = end_label

    def extract(self, subject: Subject) -> Optional[Event]:
        start = self._find_labelled(subject, self.start_label)
        end = self._find_labelled(subject, self.end_label)

        positional = self._date_collections(subject)

        if start is None and positional:
            start = positional.pop(0)
        if start is None:
            logger.debug("No start date on %s", subject.page.title)
            return None
        if end is None and positional:
            end = positional.pop(0)

        return Event(
            subject,
            TimeValue.from_raw(start.first_value()),
            TimeValue.from_raw(end.first_value()) if end is not None else None,
        )

    @staticmethod
    def _find_labelled(subject: Subject, label: Optional[str]) -> Optional[PropertyValueCollection]:
        if not label:
            return None
        for collection in subject.property_values:
            if collection.label == label and not collection.is_empty():
                return collection
        return None

    def _date_collections(self, subject: Subject) -> List[PropertyValueCollection]:
        # Labelled collections only ever fill their own role.
        return [
            c for c in subject.property_values
            if c.property.is_date and not c.is_empty()
            and c.label not in (self.start_label, self.end_label)
        ]
