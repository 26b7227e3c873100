"""Test fixtures including MockProvider for deterministic testing."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import pytest

from noticegen.errors import TransportError
from noticegen.types.providers import ChatMessage, StreamEvent
from noticegen.types.request import RequestParameters


class MockProvider:
    """A deterministic mock provider that streams scripted fragments.

    Usage:
        provider = MockProvider(["<think>", "分析", "</think>", "通知\\n", "正文"])
    """

    def __init__(self, fragments: list[str], model: str = "mock-model"):
        self._fragments = list(fragments)
        self._model = model
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    @property
    def model_id(self) -> str:
        return self._model

    async def chat_completion_stream(
        self,
        messages: list[ChatMessage],
        user: str | None = None,
    ) -> AsyncIterator[StreamEvent]:
        """Yield one text_delta per scripted fragment, then message_end."""
        self.calls.append({"messages": messages, "user": user})
        try:
            for fragment in self._fragments:
                yield StreamEvent(type="text_delta", text=fragment)
            yield StreamEvent(
                type="message_end", stop_reason="stop",
                usage={"input_tokens": 100, "output_tokens": 50},
            )
        finally:
            self.closed = True


class FailingMockProvider(MockProvider):
    """Streams the scripted fragments, then raises TransportError."""

    async def chat_completion_stream(
        self,
        messages: list[ChatMessage],
        user: str | None = None,
    ) -> AsyncIterator[StreamEvent]:
        self.calls.append({"messages": messages, "user": user})
        for fragment in self._fragments:
            yield StreamEvent(type="text_delta", text=fragment)
        raise TransportError("Simulated connection reset")


NOTICE_FRAGMENTS = [
    "<thi", "nk>\n分析低温对京九线的影响\n</th", "ink>\n",
    "通知\n", "赣州车务段关于积极做好低温天气应对工作的通知\n",
    "机关各科室、段属各站所：\n",
    "1. **加强值班值守**各站", "所要严格落实值班制度。\n",
    "2. 做好设备检查。",
]


@pytest.fixture
def params() -> RequestParameters:
    return RequestParameters(
        unit="赣州车务段",
        weather="低温天气",
        start_date="2024年12月14日",
        end_date="2024年12月17日",
        lines="京九线、赣龙线",
        attachment="",
        user="user-042",
    )


@pytest.fixture
def mock_provider() -> MockProvider:
    """A mock provider streaming a short notice with a reasoning block."""
    return MockProvider(NOTICE_FRAGMENTS)


@pytest.fixture
def failing_mock_provider() -> FailingMockProvider:
    return FailingMockProvider(["通知\n", "部分内容"])
