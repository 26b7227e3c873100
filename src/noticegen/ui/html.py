"""HTML export of rendered notice markup."""

from __future__ import annotations

import html
from pathlib import Path

_TEMPLATE = """<!DOCTYPE html>
<html lang="zh-CN">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body style="max-width: 900px; margin: 2rem auto;">
{reasoning}<div style="white-space: pre-wrap; line-height: 1.6;">
{markup}
</div>
</body>
</html>
"""

_REASONING_TEMPLATE = """<details>
<summary>思考过程</summary>
<pre style="white-space: pre-wrap; font-family: monospace; background-color: #f5f5f5; padding: 1rem;">{text}</pre>
</details>
"""


def to_html_document(markup: str, reasoning: str = "", title: str = "铁路通知") -> str:
    """Wrap *markup* in a standalone page.

    The markup is inserted as-is; reasoning is plain text and is escaped.
    """
    reasoning_block = _REASONING_TEMPLATE.format(text=html.escape(reasoning)) if reasoning else ""
    return _TEMPLATE.format(title=html.escape(title), reasoning=reasoning_block, markup=markup)


def write_html(path: str | Path, markup: str, reasoning: str = "") -> Path:
    out = Path(path)
    out.write_text(to_html_document(markup, reasoning), encoding="utf-8")
    return out
