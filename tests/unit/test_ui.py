"""Tests for noticegen.ui — live terminal view and HTML export."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from noticegen.core.render import render
from noticegen.core.session import select_display
from noticegen.types.stream import StreamState, StreamStatus
from noticegen.ui.html import to_html_document, write_html
from noticegen.ui.terminal import (
    STYLE_TITLE,
    LiveNoticeView,
    build_view,
    markup_to_text,
)


def _console() -> tuple[Console, StringIO]:
    buf = StringIO()
    return Console(file=buf, force_terminal=False, width=100), buf


def _state(**kwargs) -> StreamState:
    kwargs.setdefault("status", StreamStatus.STREAMING)
    return StreamState(**kwargs)


class TestBuildView:
    def test_reasoning_and_result(self):
        console, buf = _console()
        update = select_display(_state(raw="<think>分析</think>正文", reasoning="分析", final="正文"))
        console.print(build_view(update))
        output = buf.getvalue()
        assert "思考过程" in output
        assert "分析" in output
        assert "正文" in output
        assert "streaming" in output

    def test_reasoning_hidden(self):
        console, buf = _console()
        update = select_display(_state(raw="<think>分析</think>正文", reasoning="分析", final="正文"))
        console.print(build_view(update, show_reasoning=False))
        assert "思考过程" not in buf.getvalue()

    def test_placeholder(self):
        console, buf = _console()
        console.print(build_view(select_display(_state())))
        assert "等待生成" in buf.getvalue()

    def test_error(self):
        console, buf = _console()
        update = select_display(_state(raw="x", final="x", status=StreamStatus.FAILED, error="出错了"))
        console.print(build_view(update))
        assert "出错了" in buf.getvalue()
        assert "failed" in buf.getvalue()

    def test_result_panel_shows_formatted_text(self):
        console, buf = _console()
        update = select_display(_state(raw="**重要**内容", final="**重要**内容"))
        console.print(build_view(update))
        output = buf.getvalue()
        assert "重要内容" in output
        assert "**" not in output
        assert "<strong>" not in output

    def test_raw_source_is_formatted(self):
        console, buf = _console()
        update = select_display(_state(raw="  *斜体*", final=""))
        assert update.source == "raw"
        console.print(build_view(update))
        assert "斜体" in buf.getvalue()
        assert "*" not in buf.getvalue()


class TestMarkupToText:
    def test_bold_span(self):
        text = markup_to_text("<strong>重要</strong>内容")
        assert text.plain == "重要内容"
        assert [(s.start, s.end, str(s.style)) for s in text.spans] == [(0, 2, "bold")]

    def test_nested_styles(self):
        text = markup_to_text('<div style="margin: 10px 0;"><strong>1. 标题</strong>正文</div>')
        assert text.plain == "1. 标题正文"
        assert any(str(s.style) == "bold" and text.plain[s.start:s.end] == "1. 标题"
                   for s in text.spans)

    def test_title_block(self):
        text = markup_to_text(render("通知\n正文"))
        assert text.plain == "通知\n正文"
        assert str(text.spans[0].style) == STYLE_TITLE

    def test_headings_and_italic(self):
        text = markup_to_text(render("### 三级\n*斜*"))
        assert text.plain == "三级\n斜"
        assert {str(s.style) for s in text.spans} == {"bold italic", "italic"}

    def test_unknown_tags_literal(self):
        assert markup_to_text("<think>思考").plain == "<think>思考"
        assert markup_to_text("a</strong>b").plain == "a</strong>b"


class TestLiveNoticeView:
    def test_update_without_live_prints(self):
        console, buf = _console()
        view = LiveNoticeView(console=console)
        update = select_display(_state(raw="通知", final="通知", status=StreamStatus.DONE))
        view.update(update)
        assert view.last is update
        assert "通知" in buf.getvalue()

    def test_context_manager(self):
        console, buf = _console()
        update = select_display(_state(raw="结果", final="结果", status=StreamStatus.DONE))
        with LiveNoticeView(console=console) as view:
            view.update(update)
        assert "结果" in buf.getvalue()


class TestHtml:
    def test_document(self):
        doc = to_html_document("<strong>重要</strong>", reasoning="a < b")
        assert doc.startswith("<!DOCTYPE html>")
        assert "<strong>重要</strong>" in doc
        assert "a &lt; b" in doc
        assert "<details>" in doc

    def test_no_reasoning_block(self):
        assert "<details>" not in to_html_document("x")

    def test_write_html(self, tmp_path):
        path = write_html(tmp_path / "notice.html", "<h1>通知</h1>")
        assert path.read_text(encoding="utf-8").count("<h1>通知</h1>") == 1
