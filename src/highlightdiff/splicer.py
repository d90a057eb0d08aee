# -*- coding: utf-8 -*-
"""
Splicing annotations into the hunk text.
"""
from genshi.core import Markup

from .errors import InvariantError
from .utils import escape_bytes


def splice(text, annotations, quotes=True):
    """
    Render `text` (bytes) with the ordered annotations applied.

    Content between markup boundaries goes through HTML escaping; the `left`
    and `right` markup of each annotation is emitted verbatim. Open
    annotations form a stack, so the innermost one closes first.
    """
    parts = []
    stack = []
    pos = 0

    def copy_until(offset):
        if offset > pos:
            parts.append(escape_bytes(text[pos:offset], quotes=quotes))
        return max(pos, offset)

    def close(ann):
        if ann.end > len(text):
            raise InvariantError('annotation still open at end of text: %r' % (ann,), inner=ann)
        parts.append(ann.right)

    for ann in annotations:
        if ann.start < pos:
            raise InvariantError('annotation starts before the current offset %d: %r'
                                 % (pos, ann), inner=ann)
        while stack and stack[-1].end <= ann.start:
            top = stack.pop()
            pos = copy_until(top.end)
            close(top)
        if stack and ann.end > stack[-1].end:
            raise InvariantError('annotation crosses its parent: %r and %r'
                                 % (stack[-1], ann), outer=stack[-1], inner=ann)
        pos = copy_until(ann.start)
        parts.append(ann.left)
        stack.append(ann)

    while stack:
        top = stack.pop()
        pos = copy_until(min(top.end, len(text)))
        close(top)
    copy_until(len(text))
    return Markup(u''.join(parts))
