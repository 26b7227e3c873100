"""Tests for noticegen.core.prompt."""

from __future__ import annotations

from dataclasses import replace

from noticegen.core.prompt import build_messages, build_system_prompt, build_user_prompt
from noticegen.types.request import DEFAULT_REQUEST


class TestPrompt:
    def test_user_prompt_lists_fields(self):
        text = build_user_prompt(DEFAULT_REQUEST)
        assert text.startswith("请根据以下参数生成铁路运输恶劣天气应对通知：")
        for value in (
            DEFAULT_REQUEST.unit, DEFAULT_REQUEST.weather, DEFAULT_REQUEST.start_date,
            DEFAULT_REQUEST.end_date, DEFAULT_REQUEST.lines, DEFAULT_REQUEST.attachment,
        ):
            assert value in text

    def test_system_prompt_title_format(self):
        text = build_system_prompt(DEFAULT_REQUEST)
        assert "[赣州车务段]关于积极做好[低温天气]应对工作的通知" in text
        assert "机关各科室、段属各站所：" in text
        assert "全文必须超过1000字" in text

    def test_system_prompt_embeds_analysis_scaffold(self):
        text = build_system_prompt(DEFAULT_REQUEST)
        assert "<think>" in text and "</think>" in text
        assert "- 涉及线路：京九线、赣龙线、兴泉线" in text

    def test_attachment_signature_line(self):
        text = build_system_prompt(DEFAULT_REQUEST)
        assert f"附件：{DEFAULT_REQUEST.attachment}" in text

    def test_no_attachment_signature_line_when_empty(self):
        text = build_system_prompt(replace(DEFAULT_REQUEST, attachment=""))
        assert "\n附件：" not in text

    def test_values_interpolated_verbatim(self):
        params = replace(DEFAULT_REQUEST, unit="{unit} <b>")
        assert "[{unit} <b>]关于积极做好" in build_system_prompt(params)

    def test_messages(self):
        messages = build_messages(DEFAULT_REQUEST)
        assert [m.role for m in messages] == ["system", "user"]
        assert messages[1].content == build_user_prompt(DEFAULT_REQUEST)
