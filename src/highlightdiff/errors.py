# -*- coding: utf-8 -*-
"""
Exception classes raised while highlighting a hunk.
"""


class HighlightError(Exception):
    """The base class of all highlighting failures for one hunk."""


class BoundaryError(HighlightError):
    """An annotation offset is outside the text or splits a UTF-8 sequence."""

    def __init__(self, message, annotation=None, offset=None):
        HighlightError.__init__(self, message)
        self.annotation = annotation
        self.offset = offset


class InvariantError(HighlightError):
    """Two annotations cross without nesting, or markup was left unbalanced."""

    def __init__(self, message, outer=None, inner=None):
        HighlightError.__init__(self, message)
        self.outer = outer
        self.inner = inner
