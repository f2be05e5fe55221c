# modern_timeline/options.py
"""Timeline display options, read from the environment.

Every option can be set with a ``MODERN_TIMELINE_<NAME>`` variable, for
example ``MODERN_TIMELINE_HEIGHT=500`` or ``MODERN_TIMELINE_POSITION=top``.
A ``.env`` file in the working directory is loaded first.
"""

import os
from dataclasses import dataclass, fields
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .model import EventExtractor
from .presenter import SimpleSlidePresenter, SlidePresenter, TemplateSlidePresenter

ENV_PREFIX = "MODERN_TIMELINE_"

POSITIONS = ("top", "bottom")

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class TimelineOptions:
    width: str = "100%"
    height: int = 400
    bookmark: bool = False
    background: str = "white"
    scale_factor: int = 2
    position: str = "bottom"
    tick_width: int = 100
    start_at_slide: int = 0
    start_at_end: bool = False
    transition_duration: int = 1000
    nav_height: int = 200
    template: Optional[str] = None
    image_property: Optional[str] = None
    start_label: Optional[str] = None
    end_label: Optional[str] = None

    def __post_init__(self):
        if not self.width.strip():
            raise ConfigurationError("width", self.width, "must not be empty")
        if self.position not in POSITIONS:
            raise ConfigurationError("position", self.position, f"expected one of {POSITIONS}")
        for name in ("height", "scale_factor", "tick_width", "transition_duration", "nav_height"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(name, getattr(self, name), "must be positive")
        if self.start_at_slide < 0:
            raise ConfigurationError("start_at_slide", self.start_at_slide, "must not be negative")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TimelineOptions":
        if environ is None:
            load_dotenv()
            environ = os.environ

        values = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            values[f.name] = _parse(f.name, raw, f.default)
        return cls(**values)

    def to_widget_options(self) -> Dict:
        """Options object handed to the TimelineJS widget."""
        return {
            "hash_bookmark": self.bookmark,
            "default_bg_color": self.background,
            "scale_factor": self.scale_factor,
            "timenav_position": self.position,
            "optimal_tick_width": self.tick_width,
            "start_at_slide": self.start_at_slide,
            "start_at_end": self.start_at_end,
            "duration": self.transition_duration,
            "timenav_height": self.nav_height,
        }

    def container_size(self) -> Dict[str, str]:
        """CSS size of the element the widget is mounted in."""
        return {"width": self.width, "height": f"{self.height}px"}

    def new_presenter(self, **kwargs) -> SlidePresenter:
        if self.template:
            return TemplateSlidePresenter(self.template, image_property=self.image_property, **kwargs)
        return SimpleSlidePresenter(image_property=self.image_property, **kwargs)

    def new_extractor(self) -> EventExtractor:
        return EventExtractor(start_label=self.start_label, end_label=self.end_label)


def _parse(name: str, raw: str, default):
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ConfigurationError(name, raw, "expected a boolean")
    if isinstance(default, int):
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(name, raw, "expected an integer") from None
    if default is None:
        return raw or None
    return raw
