from __future__ import annotations

import re
from enum import Enum


class FormatKind(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    WIKI_LINK = "wiki_link"
    HEADING = "heading"
    LIST = "list"


INLINE_KINDS = frozenset({FormatKind.BOLD, FormatKind.ITALIC, FormatKind.CODE, FormatKind.WIKI_LINK})
PREFIX_KINDS = frozenset({FormatKind.HEADING, FormatKind.LIST})

_HEADING_PREFIX_RE = re.compile(r"^#{1,6} ")
_LIST_PREFIX_RE = re.compile(r"^(?:[-*+]|\d+\.) ")


def coerce_kind(kind) -> FormatKind | None:
    """FormatKind for an enum member or its string value, None otherwise."""
    try:
        return FormatKind(kind)
    except ValueError:
        return None


# ───────────────────────── wrapping ─────────────────────────


def wrap_bold(text: str | None) -> str:
    return f"**{text or ''}**"


def wrap_italic(text: str | None) -> str:
    return f"*{text or ''}*"


def wrap_code(text: str | None) -> str:
    return f"`{text or ''}`"


def wrap_wiki_link(text: str | None) -> str:
    return f"[[{text or ''}]]"


_WRAPPERS = {
    FormatKind.BOLD: wrap_bold,
    FormatKind.ITALIC: wrap_italic,
    FormatKind.CODE: wrap_code,
    FormatKind.WIKI_LINK: wrap_wiki_link,
}


def wrap(kind, text: str | None) -> str:
    """
    Unconditionally wrap text in the marker pair for kind.
    Kinds without a marker pair return the text as-is.
    """
    wrapper = _WRAPPERS.get(coerce_kind(kind))
    if wrapper is None:
        return text or ""
    return wrapper(text)


# ───────────────────────── toggling ─────────────────────────


def _edge_runs(text: str, opener: str, closer: str) -> tuple[int, int]:
    leading = len(text) - len(text.lstrip(opener))
    trailing = len(text) - len(text.rstrip(closer))
    return leading, trailing


def _unwrap_runs(text: str, opener: str, closer: str, leading: int, trailing: int, width: int) -> str:
    # Strip both runs, then give back whatever was beyond `width` on each side.
    inner = text[leading:len(text) - trailing]
    return opener * (leading - width) + inner + closer * (trailing - width)


def toggle_bold(text: str | None) -> str:
    """
    **x** -> x, ***x*** -> *x*, x -> **x**.

    A lone or lopsided run (`*x`, `**x*`) gets one more star on each side
    instead of being unwrapped.
    """
    if not text:
        return ""

    leading, trailing = _edge_runs(text, "*", "*")
    if leading >= 2 and trailing >= 2:
        return _unwrap_runs(text, "*", "*", leading, trailing, 2)
    if leading or trailing:
        return f"*{text}*"
    return wrap_bold(text)


def _toggle_single_marker(text: str | None, marker: str, *, exclude_double: bool = False) -> str:
    if not text:
        return ""

    trimmed = text.strip()
    wrapped = (
        len(trimmed) >= 3
        and trimmed.startswith(marker)
        and trimmed.endswith(marker)
        and not (exclude_double and trimmed.startswith(marker * 2))
    )
    if wrapped:
        return trimmed[1:-1]
    return f"{marker}{text}{marker}"


def toggle_italic(text: str | None) -> str:
    """*x* -> x, x -> *x*. A bold run (**x**) is wrapped, not unwrapped."""
    return _toggle_single_marker(text, "*", exclude_double=True)


def toggle_code(text: str | None) -> str:
    return _toggle_single_marker(text, "`")


def toggle_wiki_link(text: str | None) -> str:
    """
    [[Note]] -> Note, Note -> [[Note]].

    Unbalanced brackets are completed rather than stripped: both sides are
    padded to one more than the longer run, so [[Note] becomes [[[Note]]].
    """
    text = text or ""
    leading, trailing = _edge_runs(text, "[", "]")
    if leading >= 2 and trailing >= 2:
        return _unwrap_runs(text, "[", "]", leading, trailing, 2)
    if leading or trailing:
        target = max(leading, trailing) + 1
        return "[" * (target - leading) + text + "]" * (target - trailing)
    return wrap_wiki_link(text)


_TOGGLERS = {
    FormatKind.BOLD: toggle_bold,
    FormatKind.ITALIC: toggle_italic,
    FormatKind.CODE: toggle_code,
    FormatKind.WIKI_LINK: toggle_wiki_link,
}


def toggle(kind, text: str | None) -> str:
    toggler = _TOGGLERS.get(coerce_kind(kind))
    if toggler is None:
        return text or ""
    return toggler(text)


# ───────────────────────── prefixes / links ─────────────────────────


def insert_heading_prefix(level: int | None = 1) -> str:
    try:
        level_i = int(level) if level is not None else 1
    except (TypeError, ValueError):
        level_i = 1
    return "#" * max(1, min(6, level_i)) + " "


def insert_list_prefix(ordered: bool = False) -> str:
    return "1. " if ordered else "- "


def insert_link(text: str | None, url: str | None) -> str:
    return f"[{text or ''}]({url or ''})"


def _prefix_for(kind: FormatKind, *, level, ordered) -> str:
    if kind is FormatKind.HEADING:
        return insert_heading_prefix(level)
    return insert_list_prefix(ordered)


# ───────────────────────── applying to a buffer ─────────────────────────


def clamp_range(size: int, start: int | None, end: int | None) -> tuple[int, int]:
    start = 0 if start is None else min(max(start, 0), size)
    end = size if end is None else min(max(end, 0), size)
    if start > end:
        start = end
    return start, end


def apply_to_range(
    full_text: str | None,
    kind,
    start: int | None = None,
    end: int | None = None,
    *,
    level: int | None = 1,
    ordered: bool = False,
) -> str:
    """
    Format full_text[start:end] and splice the result back in.

    Inline kinds toggle the slice, heading/list kinds prefix it. Indices
    follow slice semantics and are clamped into the text. On an empty
    buffer heading/list return just the prefix.
    """
    kind = coerce_kind(kind)

    if not full_text:
        if kind in PREFIX_KINDS:
            return _prefix_for(kind, level=level, ordered=ordered)
        return ""

    if kind is None:
        return full_text

    start, end = clamp_range(len(full_text), start, end)
    selection = full_text[start:end]

    if kind in PREFIX_KINDS:
        formatted = _prefix_for(kind, level=level, ordered=ordered) + selection
    else:
        formatted = toggle(kind, selection)

    return full_text[:start] + formatted + full_text[end:]


def line_bounds(text: str, position: int) -> tuple[int, int]:
    """[start, end) of the line containing position (newline excluded)."""
    position = min(max(position, 0), len(text))
    start = text.rfind("\n", 0, position) + 1
    end = text.find("\n", position)
    if end == -1:
        end = len(text)
    return start, end


def apply_prefix_to_line(
    full_text: str | None,
    kind,
    position: int | None = None,
    *,
    level: int | None = 1,
    ordered: bool = False,
) -> tuple[str, int]:
    """
    Put a heading/list prefix on the line under the cursor.

    An existing marker of the same family (heading, or bullet / numbered
    list) is replaced, or removed when it is already the requested one. Returns
    (new_text, new_cursor_position).
    """
    full_text = full_text or ""
    position = len(full_text) if position is None else min(max(position, 0), len(full_text))

    kind = coerce_kind(kind)
    if kind not in PREFIX_KINDS:
        return full_text, position

    start, end = line_bounds(full_text, position)
    line = full_text[start:end]
    prefix = _prefix_for(kind, level=level, ordered=ordered)

    marker_re = _HEADING_PREFIX_RE if kind is FormatKind.HEADING else _LIST_PREFIX_RE
    m = marker_re.match(line)
    if m:
        current = m.group(0)
        new_line = line[len(current):] if current == prefix else prefix + line[len(current):]
    else:
        new_line = prefix + line

    new_text = full_text[:start] + new_line + full_text[end:]
    new_position = max(start, position + len(new_line) - len(line))
    return new_text, new_position
