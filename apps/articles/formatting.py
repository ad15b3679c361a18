"""
Article body formatting.

Editors write bodies with bracket markers; readers get HTML. Formatting is a
pure function of the raw body, so re-running it on the stored raw text always
gives the same display body.

Markers (content may span lines, matching is non-greedy):
    [QUOTE sayer="X"]...[/QUOTE]  attributed large quote
    [QUOTE]...[/QUOTE]            large quote
    [HIGHLIGHT]...[/HIGHLIGHT]
    [BOLD]...[/BOLD]
    [ITALIC]...[/ITALIC]
    [HEADING]...[/HEADING]

Usage:
    formatted = format_content(raw)
    formatted.display   # HTML body
    formatted.quotes    # [Quote(text, sayer, position), ...]
"""

import re
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional


# Applied in order: the attributed quote must run before the bare one.
MARKER_RULES = [
    (
        re.compile(r'\[QUOTE sayer="([^"]*)"\](.*?)\[/QUOTE\]', re.DOTALL),
        '<blockquote class="news-large-quote" data-sayer="\\1"><p>\\2</p>'
        '<footer>\u2014 \\1</footer></blockquote>',
    ),
    (
        re.compile(r'\[QUOTE\](.*?)\[/QUOTE\]', re.DOTALL),
        '<blockquote class="news-large-quote">\\1</blockquote>',
    ),
    (
        re.compile(r'\[HIGHLIGHT\](.*?)\[/HIGHLIGHT\]', re.DOTALL),
        '<span class="news-highlight">\\1</span>',
    ),
    (
        re.compile(r'\[BOLD\](.*?)\[/BOLD\]', re.DOTALL),
        '<strong>\\1</strong>',
    ),
    (
        re.compile(r'\[ITALIC\](.*?)\[/ITALIC\]', re.DOTALL),
        '<em>\\1</em>',
    ),
    (
        re.compile(r'\[HEADING\](.*?)\[/HEADING\]', re.DOTALL),
        '<h3 class="content-heading">\\1</h3>',
    ),
]

QUOTE_PATTERN = re.compile(r'\[QUOTE(?:\s+sayer="([^"]*)")?\](.*?)\[/QUOTE\]', re.DOTALL)


@dataclass
class Quote:
    """A quote found in a raw body."""
    text: str
    sayer: Optional[str] = None
    # Offset of `text` in the raw body
    position: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class FormattedContent:
    """Output of format_content."""
    display: str = ''
    quotes: List[Quote] = field(default_factory=list)


def render_markers(raw: str) -> str:
    """Replace every formatting marker pair with its HTML."""
    if not raw:
        return ''
    display = raw
    for pattern, replacement in MARKER_RULES:
        display = pattern.sub(replacement, display)
    return display


def extract_quotes(raw: str) -> List[Quote]:
    """
    Collect quotes from the raw body, left to right.

    Each quote's text is the stripped inner text of the marker and its position
    satisfies raw[position:position + len(text)] == text.
    """
    if not raw:
        return []

    quotes = []
    for match in QUOTE_PATTERN.finditer(raw):
        inner = match.group(2) or ''
        text = inner.strip()
        leading = len(inner) - len(inner.lstrip())
        quotes.append(Quote(
            text=text,
            sayer=match.group(1) or None,
            position=match.start(2) + leading,
        ))
    return quotes


def format_content(raw: str) -> FormattedContent:
    """Render the display body and extract quotes in one call."""
    if not raw:
        return FormattedContent()
    return FormattedContent(display=render_markers(raw), quotes=extract_quotes(raw))
