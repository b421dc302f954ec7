"""
Section and heading-label extraction for Blocktree.
"""

import re
from typing import Optional

WIKI_LINK_PATTERN = re.compile(r'\[\[([^\]|]*)(?:\|([^\]]*))?\]\]')
HEADING_PREFIX_PATTERN = re.compile(r'^#+')


def description(markdown: str) -> str:
    """
    Extract the free text between the first heading and the next one.

    Headings are found by a plain '#' line prefix, so a line of bare '#'
    characters counts as well.

    Args:
        markdown: A full markdown document

    Returns:
        The trimmed description, or an empty string when the document has no
        heading or the first heading is its last line
    """
    lines = markdown.split('\n')
    first_header_index = next(
        (i for i, line in enumerate(lines) if line.startswith('#')), -1
    )

    if first_header_index == -1 or first_header_index == len(lines) - 1:
        return ''

    content_after_header = lines[first_header_index + 1:]
    for i, line in enumerate(content_after_header):
        if line.startswith('#'):
            content_after_header = content_after_header[:i]
            break

    return '\n'.join(content_after_header).strip()


def link_path(text: str) -> Optional[str]:
    """
    Get the path of the first [[path]] or [[path|display]] link in text.

    Segments are trimmed and re-joined with '/'. Returns None when the text
    has no link or the link path is blank.
    """
    match = WIKI_LINK_PATTERN.search(text)
    if not match:
        return None

    segments = [segment.strip() for segment in match.group(1).split('/')]
    path = '/'.join(segments)
    return path if path.strip('/') else None


def heading_text(text: str) -> str:
    """Strip the leading '#' run and surrounding whitespace from a heading."""
    first_line = text.split('\n')[0]
    return HEADING_PREFIX_PATTERN.sub('', first_line).strip()


def heading_label(text: str) -> str:
    """
    Get the label a heading contributes to the tree path of its content.

    The path component of an embedded wiki link wins over the display text
    and over the plain heading text.
    """
    path = link_path(text)
    if path is not None:
        return path
    return heading_text(text)
