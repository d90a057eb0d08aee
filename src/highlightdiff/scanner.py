# -*- coding: utf-8 -*-
"""
Line scanning for printed hunks.

Splits the hunk text on newlines and classifies every line by its leading
marker byte. Line spans include the trailing newline, so the lines of a text
partition it exactly.
"""
from collections import namedtuple

from .config import DELETE_MARKER, INSERT_MARKER, HighlightConfig
from .utils import to_bytes

# Line kinds
CONTEXT = 'context'
DELETE = 'delete'
INSERT = 'insert'
OTHER = 'other'


class Line(namedtuple('Line', 'index start end marker header', defaults=(False,))):
    """
    One line of the hunk text; `start`/`end` are byte offsets, end-exclusive.

    `header` is set on hunk header lines (a subset of the Other lines).
    """
    __slots__ = ()

    def body_start(self):
        """Offset of the first byte after the marker."""
        if self.start == self.end:
            return self.start
        return self.start + 1

    def content_end(self, text):
        """Offset of the end of the line without its newline."""
        if self.end > self.start and text[self.end - 1:self.end] == b'\n':
            return self.end - 1
        return self.end

    def body(self, text):
        return text[self.body_start():self.content_end(text)]


def classify(line, config=None):
    """Return the line kind for the raw bytes of one line."""
    config = config or HighlightConfig()
    first = line[:1]
    if not first:
        return CONTEXT
    if first == DELETE_MARKER:
        return DELETE
    if first == INSERT_MARKER:
        return INSERT
    if first in config.other_markers:
        return OTHER
    return CONTEXT


def scan_lines(text, config=None):
    """
    Classify every line of `text` (str or bytes).

    A text ending with a newline yields a final empty Context line starting
    at len(text), mirroring bytes.split(b'\\n').
    """
    config = config or HighlightConfig()
    text = to_bytes(text)
    lines = []
    offset = 0
    raw_lines = text.split(b'\n')
    last = len(raw_lines) - 1
    for index, raw in enumerate(raw_lines):
        end = offset + len(raw)
        if index != last:
            end += 1
        header = raw[:1] in config.header_markers
        lines.append(Line(index, offset, end, classify(raw, config), header))
        offset = end
    return lines
