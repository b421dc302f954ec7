"""
Block classification for Blocktree.

Assigns a semantic type to a block of markdown text by looking at its first
line only.
"""

import re

from ..models import BlockType

ORDERED_ITEM_PATTERN = re.compile(r'^\d+\.\s')
HEADING_LEVEL_PATTERN = re.compile(r'^(#{1,6})[ \t]')


def classify(text: str) -> BlockType:
    """
    Classify a block of markdown text.

    Prefixes are checked in a fixed precedence order and the first match
    wins, so "- [ ] x" is a task list and never an unordered list. Input
    that matches nothing is a paragraph.

    Args:
        text: Raw block text, possibly spanning several lines

    Returns:
        The BlockType of the block
    """
    first_line = text.split('\n')[0]

    if first_line.startswith('#'):
        return BlockType.HEADING
    if first_line.startswith('- [ ] ') or first_line.startswith('- [x] '):
        return BlockType.TASK_LIST
    if first_line.startswith('- ') or first_line.startswith('* '):
        return BlockType.UNORDERED_LIST
    if ORDERED_ITEM_PATTERN.match(first_line):
        return BlockType.ORDERED_LIST
    if first_line.startswith('>'):
        return BlockType.BLOCKQUOTE
    if first_line.startswith('```'):
        return BlockType.CODEBLOCK
    if first_line.startswith('!['):
        return BlockType.IMAGE
    return BlockType.PARAGRAPH


def heading_level(text: str) -> int:
    """
    Get the level of a markdown heading.

    Stricter than classify(): only 1-6 leading '#' characters followed by
    a space or tab on the first line count. "#######", "#title" and a bare
    "#" line return 0 although classify() calls all of them headings.

    Args:
        text: Raw block text

    Returns:
        The heading level 1..6, or 0 when the text is not a proper heading
    """
    first_line = text.split('\n')[0]
    match = HEADING_LEVEL_PATTERN.match(first_line)
    return len(match.group(1)) if match else 0
