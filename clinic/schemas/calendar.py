from typing import Any, Dict, List, Literal

from .base import CamelModel, UtcDateTime

class CalendarEvent(CamelModel):
    id: str
    kind: Literal["availability", "appointment"]
    title: str
    start: UtcDateTime
    end: UtcDateTime
    background_color: str
    border_color: str
    class_names: List[str]
    extended_props: Dict[str, Any]
