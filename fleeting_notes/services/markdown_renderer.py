from __future__ import annotations

import markdown as md

from fleeting_notes.core.sanitize import sanitize_rendered_html
from fleeting_notes.core.wikilinks import wikilinks_to_html


class MarkdownRenderer:
    def __init__(self, *, use_color: bool = False):
        self.use_color = use_color

    def render_body(self, text: str) -> str:
        text2 = wikilinks_to_html(text or "")
        rendered = md.markdown(text2, extensions=["fenced_code", "tables"])
        return sanitize_rendered_html(rendered)

    def render_page(self, text: str) -> str:
        link_color = "#1a5fb4" if self.use_color else "#000000"
        code_bg = "#f5f0d8" if self.use_color else "#eeeeee"
        return f"""\
<html>
<head>
  <meta charset="utf-8"/>
  <style>
    body {{ font-family: serif; padding: 12px; line-height: 1.5; }}
    code, pre {{ background: {code_bg}; }}
    pre {{ padding: 8px; }}
    a {{ color: {link_color}; text-decoration: underline; }}
  </style>
</head>
<body>{self.render_body(text)}</body>
</html>
"""
