"""Request parameters collected from the form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class RequestParameters:
    """The free-text fields of one notice request.

    No field carries a format constraint; every value is interpolated
    verbatim into the generated prompt.
    """

    unit: str  # issuing unit
    weather: str  # event / category label
    start_date: str
    end_date: str
    lines: str  # affected scope
    attachment: str = ""
    user: str = ""  # requester identifier

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RequestParameters:
        """Build parameters from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {k: "" if v is None else str(v) for k, v in data.items() if k in known}
        return cls(**values)


DEFAULT_REQUEST = RequestParameters(
    unit="赣州车务段",
    weather="低温天气",
    start_date="2024年12月14日",
    end_date="2024年12月17日",
    lines="京九线、赣龙线、兴泉线",
    attachment="《低温天气蓝色预警》（2024年第87号）",
    user="user-001",
)

# (field, label) pairs in the order the form presents them.
FORM_FIELDS: tuple[tuple[str, str], ...] = (
    ("unit", "发文单位"),
    ("weather", "天气类型"),
    ("start_date", "起始日期"),
    ("end_date", "结束日期"),
    ("lines", "涉及线路"),
    ("attachment", "附件（可选）"),
)
