"""Content renderer: turns notice text into display markup.

Rendering is an ordered pipeline of :class:`RenderRule` steps.  Each step
works on the list of lines produced by the previous one, so the order is
significant:

- bold runs before italic, otherwise ``**x**`` would be read as two
  italic markers;
- headings are tried longest prefix first;
- bold list items run before plain list items, and both run after bold so
  they see ``<strong>`` rather than ``**``.

The renderer never fails.  Text that matches no rule passes through
unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

TITLE_TOKEN = "通知"
SUBTITLE_TOKENS = ("关于", "通知")

TITLE_STYLE = (
    "text-align: center; font-weight: bold; font-size: 24px; color: red; "
    "text-decoration: underline; margin-bottom: 10px;"
)
SUBTITLE_STYLE = "text-align: center; font-weight: bold; margin: 15px 0;"
BOLD_ITEM_STYLE = "margin: 10px 0;"
ITEM_STYLE = "margin: 5px 0;"

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_ITALIC_RE = re.compile(r"\*(.*?)\*")
_HEADING_RES = (
    (re.compile(r"^### (.*)$"), "h3"),
    (re.compile(r"^## (.*)$"), "h2"),
    (re.compile(r"^# (.*)$"), "h1"),
)
_BOLD_ITEM_RE = re.compile(r"^(\d+\.)\s*<strong>(.*?)</strong>(.*)$")
_ITEM_RE = re.compile(r"^(\d+\.)\s*(.*)$")


@dataclass(frozen=True, slots=True)
class RenderRule:
    """One step of the render pipeline.

    ``apply`` receives the current lines and returns the new lines.
    Positional rules only run when rendering a final notice body.
    """

    name: str
    apply: Callable[[list[str]], list[str]]
    positional: bool = False


def _title(lines: list[str]) -> list[str]:
    """Line 1 equal to the bare title token becomes the red title block."""
    if lines and lines[0].strip() == TITLE_TOKEN:
        lines = list(lines)
        lines[0] = f'<div style="{TITLE_STYLE}">{TITLE_TOKEN}</div>'
    return lines


def _subtitle(lines: list[str]) -> list[str]:
    """Line 2 mentioning both subtitle tokens is centred, text untouched."""
    if len(lines) > 1 and all(token in lines[1] for token in SUBTITLE_TOKENS):
        lines = list(lines)
        lines[1] = f'<div style="{SUBTITLE_STYLE}">{lines[1]}</div>'
    return lines


def _bold(lines: list[str]) -> list[str]:
    return [_BOLD_RE.sub(r"<strong>\1</strong>", line) for line in lines]


def _italic(lines: list[str]) -> list[str]:
    return [_ITALIC_RE.sub(r"<em>\1</em>", line) for line in lines]


def _heading(lines: list[str]) -> list[str]:
    out: list[str] = []
    for line in lines:
        for pattern, tag in _HEADING_RES:
            m = pattern.match(line)
            if m:
                line = f"<{tag}>{m.group(1)}</{tag}>"
                break
        out.append(line)
    return out


def _bold_item(lines: list[str]) -> list[str]:
    """``1. <strong>T</strong>rest`` -> one bold wrapper over number and title."""
    return [
        _BOLD_ITEM_RE.sub(
            rf'<div style="{BOLD_ITEM_STYLE}"><strong>\1 \2</strong>\3</div>', line,
        )
        for line in lines
    ]


def _item(lines: list[str]) -> list[str]:
    """``1. rest`` -> bold number followed by plain text."""
    return [
        _ITEM_RE.sub(rf'<div style="{ITEM_STYLE}"><strong>\1</strong> \2</div>', line)
        for line in lines
    ]


DEFAULT_RULES: tuple[RenderRule, ...] = (
    RenderRule("title", _title, positional=True),
    RenderRule("subtitle", _subtitle, positional=True),
    RenderRule("bold", _bold),
    RenderRule("italic", _italic),
    RenderRule("heading", _heading),
    RenderRule("bold_item", _bold_item),
    RenderRule("item", _item),
)


def render(
    text: str,
    is_final: bool = True,
    rules: Sequence[RenderRule] = DEFAULT_RULES,
) -> str:
    """Render *text* to markup.

    Args:
        text: Notice text, either the final segment or the raw stream.
        is_final: When False the positional title/subtitle rules are
            skipped.
        rules: Pipeline to apply, in order.

    Returns:
        The markup string.  Empty input is returned as-is.
    """
    if not text:
        return text

    lines = text.split("\n")
    for rule in rules:
        if rule.positional and not is_final:
            continue
        lines = rule.apply(lines)
    return "\n".join(lines)
