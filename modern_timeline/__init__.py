# modern_timeline/__init__.py
from .exceptions import (
    TimelineError,
    MalformedDateError,
    PresenterError,
    MalformedResultError,
    ConfigurationError,
)
from .result import (
    Page,
    PrintRequest,
    PropertyValueCollection,
    Subject,
    SubjectCollection,
    parse_rows_to_subjects,
)
from .temporal import TimeValue
from .model import Event, EventExtractor
from .presenter import Slide, SlidePresenter, SimpleSlidePresenter, TemplateSlidePresenter
from .json_builder import JsonBuilder, dumps_timeline
from .options import TimelineOptions
