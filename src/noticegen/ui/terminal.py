"""Rich-powered live terminal view of a submission."""

from __future__ import annotations

import re

from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from noticegen.types.stream import StreamStatus, StreamUpdate

# ── Palette ──────────────────────────────────────────────────────────────────

STYLE_REASONING = "dim #94a3b8"
STYLE_REASONING_BORDER = "#3f3f50"
STYLE_RESULT_BORDER = "#a78bfa"
STYLE_PLACEHOLDER = "dim italic #7c7c8a"
STYLE_ERROR_BODY = "bold #f87171"
STYLE_STATUS = "#7c7c8a"

# Renderer tags mapped to Rich styles
STYLE_TITLE = "bold underline red"
STYLE_SUBTITLE = "bold"
TAG_STYLES: dict[str, str] = {
    "strong": "bold",
    "em": "italic",
    "h1": "bold underline",
    "h2": "bold",
    "h3": "bold italic",
}

REASONING_TITLE = "思考过程"
RESULT_TITLE = "生成结果："

_TAG_RE = re.compile(r'<(/?)(strong|em|h[1-3]|div)(?:\s+style="([^"]*)")?>')


def _div_style(css: str | None) -> str:
    if not css:
        return ""
    if "color: red" in css:
        return STYLE_TITLE
    if "text-align: center" in css:
        return STYLE_SUBTITLE
    return ""


def markup_to_text(markup: str) -> Text:
    """Convert renderer markup into styled Rich text.

    Only the tags the renderer emits are interpreted; anything else,
    including an unclosed ``<think>``, is shown literally.
    """
    text = Text()
    stack: list[tuple[str, str]] = []  # (tag, style)
    pos = 0
    for m in _TAG_RE.finditer(markup):
        closing, tag, css = m.group(1), m.group(2), m.group(3)
        is_open_tag = stack and stack[-1][0] == tag
        if closing and not is_open_tag:
            continue
        text.append(markup[pos:m.start()], style=" ".join(s for _, s in stack if s) or None)
        pos = m.end()
        if closing:
            stack.pop()
        else:
            style = _div_style(css) if tag == "div" else TAG_STYLES[tag]
            stack.append((tag, style))
    text.append(markup[pos:], style=" ".join(s for _, s in stack if s) or None)
    return text


def build_view(update: StreamUpdate, show_reasoning: bool = True) -> RenderableType:
    """Build the renderable for one update: reasoning panel over result panel."""
    state = update.state
    parts: list[RenderableType] = []

    if show_reasoning and state.reasoning:
        parts.append(Panel(
            Text(state.reasoning, style=STYLE_REASONING),
            title=REASONING_TITLE,
            title_align="left",
            border_style=STYLE_REASONING_BORDER,
        ))

    if state.status is StreamStatus.FAILED and state.error:
        body = Text(state.error, style=STYLE_ERROR_BODY)
    elif update.source in ("final", "raw"):
        body = markup_to_text(update.markup)
    else:
        body = Text(update.markup, style=STYLE_PLACEHOLDER)

    parts.append(Panel(
        body,
        title=RESULT_TITLE,
        title_align="left",
        subtitle=Text(state.status.value, style=STYLE_STATUS),
        subtitle_align="right",
        border_style=STYLE_RESULT_BORDER,
    ))
    return Group(*parts)


class LiveNoticeView:
    """Redraws the reasoning and result panels on every update.

    Use as a context manager around the submission loop::

        with LiveNoticeView() as view:
            async for update in session.submit(params):
                view.update(update)
    """

    def __init__(self, console: Console | None = None, show_reasoning: bool = True) -> None:
        self._console = console or Console(stderr=True)
        self._show_reasoning = show_reasoning
        self._live: Live | None = None
        self.last: StreamUpdate | None = None

    def __enter__(self) -> LiveNoticeView:
        self._live = Live(console=self._console, refresh_per_second=12, transient=False)
        self._live.__enter__()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._live is not None:
            self._live.__exit__(*exc_info)
            self._live = None

    def update(self, update: StreamUpdate) -> None:
        self.last = update
        renderable = build_view(update, self._show_reasoning)
        if self._live is not None:
            self._live.update(renderable)
        else:
            self._console.print(renderable)
