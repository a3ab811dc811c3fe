from __future__ import annotations

import html
import re
from urllib.parse import quote


# [[target]]
# [[target|alias]]
WIKILINK_RE = re.compile(r"\[\[([^\]]+)\]\]")


def extract_wikilink_targets(markdown_text: str) -> set[str]:
    """
    Targets referenced from a note, alias and #heading / ^block stripped.
    Used when triaging fleeting notes into a vault.
    """
    targets: set[str] = set()
    if not markdown_text:
        return targets

    for match in WIKILINK_RE.finditer(markdown_text):
        inner = (match.group(1) or "").strip()
        if not inner:
            continue
        target, _ = _split_alias(inner)
        base, _ = _split_suffix(target)
        if base:
            targets.add(base)
    return targets


def wikilinks_to_html(markdown_text: str) -> str:
    """
    [[Note]]        → <a href="note://Note">Note</a>
    [[Note|Alias]]  → <a href="note://Note">Alias</a>
    """
    if not markdown_text:
        return markdown_text

    def replacer(match: re.Match) -> str:
        inner = (match.group(1) or "").strip()
        if not inner:
            return ""

        target, alias = _split_alias(inner)
        label = alias if alias is not None else target
        base, suffix = _split_suffix(target)

        href = "note://" + quote(base, safe="")
        if suffix:
            href += "#" + quote(suffix.lstrip("#"), safe="")

        return f'<a href="{href}">{html.escape(label, quote=False)}</a>'

    return WIKILINK_RE.sub(replacer, markdown_text)


# ───────────────────────── helpers ─────────────────────────


def _split_alias(raw: str) -> tuple[str, str | None]:
    if "|" in raw:
        target, alias = raw.split("|", 1)
        return target.strip(), alias.strip()
    return raw.strip(), None


def _split_suffix(target: str) -> tuple[str, str]:
    """Note#Heading / Note^block → (Note, #Heading / ^block)"""
    for sep in ("#", "^"):
        if sep in target:
            base, rest = target.split(sep, 1)
            return base.strip(), sep + rest
    return target.strip(), ""
