# -*- coding: utf-8 -*-
"""
Text annotations and their merging.

An annotation asks for `left` markup before byte `start` and `right` markup
after byte `end - 1` of the hunk text. Merging happens in two separate
phases: a total-order sort, then a linear validation pass that rejects
boundary violations and annotations that cross without nesting.
"""
from collections import namedtuple

from .errors import BoundaryError, InvariantError
from .utils import is_char_boundary


class Annotation(namedtuple('Annotation', 'start end left right want_inner', defaults=(False,))):
    """
    A half-open byte range of the text plus the markup wrapping it.

    `want_inner` is False for pure wrappers (line backgrounds). On identical
    ranges, annotations that want inner content are nested inside those
    that don't.
    """
    __slots__ = ()

    @property
    def length(self):
        return self.end - self.start

    def contains(self, other):
        return self.start <= other.start and other.end <= self.end

    def disjoint(self, other):
        return self.end <= other.start or other.end <= self.start

    def crosses(self, other):
        """True when the two ranges overlap without one containing the other."""
        return not (self.disjoint(other) or self.contains(other) or other.contains(self))


def annotation_sort_key(ann):
    # Outer (wider) ranges first on a shared start, then wrappers before
    # annotations wanting inner content.
    return (ann.start, -ann.end, bool(ann.want_inner))


def sort_annotations(annotations):
    """Return the annotations in nesting order. The sort is stable."""
    return sorted(annotations, key=annotation_sort_key)


def check_boundaries(text, annotations):
    """
    Raise BoundaryError for ranges that are reversed, fall outside `text`,
    or cut a multi-byte UTF-8 character in half.
    """
    size = len(text)
    for ann in annotations:
        if ann.start > ann.end:
            raise BoundaryError('annotation starts after it ends: %r' % (ann,),
                                annotation=ann, offset=ann.start)
        if ann.start < 0 or ann.end > size:
            raise BoundaryError('annotation outside text of length %d: %r' % (size, ann),
                                annotation=ann, offset=ann.end if ann.end > size else ann.start)
        for offset in (ann.start, ann.end):
            if not is_char_boundary(text, offset):
                raise BoundaryError('annotation splits a UTF-8 character at %d: %r' % (offset, ann),
                                    annotation=ann, offset=offset)


def check_nesting(annotations):
    """
    Verify that sorted annotations are pairwise disjoint or nested.

    Keeps a stack of the currently open ranges; anything ending at or before
    the next start is closed. The next annotation must then end within the
    innermost open range.
    """
    stack = []
    prev_key = None
    for ann in annotations:
        key = annotation_sort_key(ann)
        if prev_key is not None and key < prev_key:
            raise InvariantError('annotations are not sorted: %r' % (ann,), inner=ann)
        prev_key = key
        while stack and stack[-1].end <= ann.start:
            stack.pop()
        if stack and ann.end > stack[-1].end:
            raise InvariantError('annotations overlap without nesting: %r and %r'
                                 % (stack[-1], ann), outer=stack[-1], inner=ann)
        stack.append(ann)


def merge_annotations(text, annotations):
    """Sort and validate the annotations for splicing into `text`."""
    check_boundaries(text, annotations)
    rv = sort_annotations(annotations)
    check_nesting(rv)
    return rv
