"""Tests for noticegen.types module."""

from __future__ import annotations

import dataclasses

import pytest

from noticegen.types.config import DEFAULT_MODEL, ClientConfig
from noticegen.types.providers import ChatMessage, StreamEvent
from noticegen.types.request import DEFAULT_REQUEST, FORM_FIELDS, RequestParameters
from noticegen.types.stream import StreamState, StreamStatus, StreamUpdate


class TestRequestParameters:
    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_REQUEST.unit = "x"  # type: ignore[misc]

    def test_from_mapping(self):
        params = RequestParameters.from_mapping({
            "unit": "南昌车务段", "weather": "暴雨", "start_date": "6月1日",
            "end_date": "6月3日", "lines": "沪昆线", "attachment": None,
            "user": 7, "unknown": "ignored",
        })
        assert params.unit == "南昌车务段"
        assert params.attachment == ""
        assert params.user == "7"

    def test_from_mapping_missing_required(self):
        with pytest.raises(TypeError):
            RequestParameters.from_mapping({"unit": "x"})

    def test_form_fields_match_dataclass(self):
        names = {f.name for f in dataclasses.fields(RequestParameters)}
        assert {name for name, _ in FORM_FIELDS} <= names


class TestStreamTypes:
    def test_status_terminal(self):
        assert StreamStatus.DONE.is_terminal
        assert StreamStatus.FAILED.is_terminal
        assert not StreamStatus.IDLE.is_terminal
        assert not StreamStatus.STREAMING.is_terminal

    def test_defaults(self):
        state = StreamState()
        assert state.status is StreamStatus.IDLE
        assert state.generation == 0

    def test_update(self):
        update = StreamUpdate(state=StreamState(), markup="m", source="placeholder")
        assert update.markup == "m"


class TestProviderTypes:
    def test_stream_event(self):
        ev = StreamEvent(type="text_delta", text="hi")
        assert ev.text == "hi"
        assert ev.stop_reason is None

    def test_chat_message(self):
        assert ChatMessage(role="user", content="x").role == "user"

    def test_client_config_default_model(self):
        assert ClientConfig().model == DEFAULT_MODEL == "deepseek-chat"
