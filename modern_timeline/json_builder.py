# modern_timeline/json_builder.py
import json
import logging
from typing import Dict, List, Optional

from .exceptions import PresenterError, TimelineError
from .model import Event, EventExtractor
from .presenter import SlidePresenter
from .result import SubjectCollection

logger = logging.getLogger(__name__)


class JsonBuilder:
    """Builds the timeline widget document from query result subjects."""

    def __init__(self, presenter: SlidePresenter, extractor: Optional[EventExtractor] = None):
        self.presenter = presenter
        self.extractor = extractor or EventExtractor()

    def build_timeline_json(self, subjects: SubjectCollection) -> Dict[str, List[Dict]]:
        return {
            "events": [self.build_event(event) for event in self.build_events(subjects)]
        }

    def build_events(self, subjects: SubjectCollection) -> List[Event]:
        events = []
        for subject in subjects:
            event = self.extractor.extract(subject)
            if event is None:
                logger.debug("Skipping %s, it has no start date", subject.page.title)
                continue
            events.append(event)
        logger.debug("Extracted %d events from %d subjects", len(events), len(subjects))
        return events

    def build_event(self, event: Event) -> Dict:
        """Return the JSON object for one event.

        ``end_date`` and ``media`` are only present when the event has them.
        """
        json_event = {"start_date": event.start_date.to_json()}

        if event.end_date is not None:
            json_event["end_date"] = event.end_date.to_json()

        slide = self._present(event)

        text = {"headline": slide.headline}
        if slide.body:
            text["body"] = slide.body
        json_event["text"] = text

        if _has_media(slide.media):
            json_event["media"] = slide.media

        return json_event

    def _present(self, event: Event):
        title = event.subject.page.title
        try:
            slide = self.presenter.present(event)
        except TimelineError:
            raise
        except Exception as e:
            raise PresenterError(title, str(e)) from e

        if slide is None or not getattr(slide, "headline", None):
            raise PresenterError(title, "presenter returned no headline")
        return slide


def _has_media(media) -> bool:
    return bool(media) and isinstance(media.get("url"), str) and bool(media["url"].strip())


def dumps_timeline(document: Dict) -> str:
    """Serialize a timeline document to JSON text, byte-identical for equal input."""
    return json.dumps(document, ensure_ascii=False, separators=(",", ":"))
