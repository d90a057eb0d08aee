# -*- coding: utf-8 -*-
"""
Character-level diffing inside replace blocks.

The bodies of a block's deleted lines (marker stripped, newline appended) are
concatenated into one string, the inserted lines into another, and the two are
aligned with difflib. Changed ranges come out in each side's own byte offset
space and are then translated back onto the hunk text, one line at a time so
no range ever covers a marker byte or a newline.
"""
import logging
from difflib import SequenceMatcher

from .annotation import Annotation
from .config import HighlightConfig
from .errors import BoundaryError
from .utils import byte_offsets, is_char_boundary

log = logging.getLogger(__name__)


class CharSequenceMatcher(SequenceMatcher):
    """
    Character aligner for the two sides of a replace block.

    difflib's autojunk heuristic is turned off: in code, characters such as
    spaces and brackets are frequent enough to be treated as junk, which would
    hide real matches. `min_match` (config `sequence_match_threshold`) drops
    matches of at most that many characters, capped at a quarter of the
    shorter side; the default of 0 keeps every match.
    """

    def __init__(self, a='', b='', min_match=0):
        super().__init__(None, a, b, autojunk=False)
        self.min_match = min_match

    def get_matching_blocks(self):
        blocks = super().get_matching_blocks()
        if self.min_match <= 0:
            return blocks
        limit = min(self.min_match, min(len(self.a), len(self.b)) // 4)
        # The trailing (len(a), len(b), 0) sentinel must survive.
        return [m for m in blocks if m.size > limit or m.size == 0]


class BlockContent(object):
    """
    The concatenated bodies of one side of a replace block.

    `segments` holds one entry per line:
    (local_start, local_end, text_start, text_limit), where local offsets are
    bytes into `data` and text offsets are bytes into the hunk text.
    `text_limit` is the end of the line content, so a change never covers a
    newline and every line of a changed run is marked the same way.
    """

    def __init__(self, lines, text):
        parts = []
        self.segments = []
        local = 0
        for line in lines:
            body = line.body(text) + b'\n'
            parts.append(body)
            self.segments.append((local, local + len(body), line.body_start(), line.content_end(text)))
            local += len(body)
        self.data = b''.join(parts)
        self.text = self.data.decode('utf-8', 'surrogateescape')
        self._offsets = None

    def __len__(self):
        return len(self.data)

    def byte_offset(self, char_offset):
        if self._offsets is None:
            self._offsets = byte_offsets(self.text)
        return self._offsets[char_offset]

    def to_text_ranges(self, start, end):
        """Yield the hunk text ranges covered by local byte range [start, end)."""
        for seg_start, seg_end, text_start, text_limit in self.segments:
            if seg_end <= start:
                continue
            if seg_start >= end:
                break
            lo = text_start + max(start, seg_start) - seg_start
            hi = min(text_start + min(end, seg_end) - seg_start, text_limit)
            if hi > lo:
                yield lo, hi


class IntralineDiffer(object):
    """Aligns the two sides of a replace block character by character."""

    def __init__(self, config=None):
        self.config = config or HighlightConfig()

    def _change(self, start, end):
        return Annotation(start, end, self.config.change_open,
                          self.config.close_markup, want_inner=True)

    def diff(self, left, right):
        """
        Diff two BlockContent sides.

        Returns (left_annotations, right_annotations) with offsets local to
        each side's `data`. Deleted and replaced ranges go left, inserted and
        replaced ranges go right.
        """
        matcher = CharSequenceMatcher(left.text, right.text,
                                      min_match=getattr(self.config, 'sequence_match_threshold', 0))
        left_anns = []
        right_anns = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == 'equal':
                continue
            if tag in ('replace', 'delete') and i2 > i1:
                left_anns.append(self._change(left.byte_offset(i1), left.byte_offset(i2)))
            if tag in ('replace', 'insert') and j2 > j1:
                right_anns.append(self._change(right.byte_offset(j1), right.byte_offset(j2)))
        return left_anns, right_anns


def translate(annotations, content, text):
    """
    Move local annotations of one block side onto the hunk text.

    A range spanning several lines is split per line. Every resulting offset
    must be a UTF-8 character boundary of `text`; anything else means the
    differ produced a bad range and raises BoundaryError.
    """
    rv = []
    for ann in annotations:
        for start, end in content.to_text_ranges(ann.start, ann.end):
            for offset in (start, end):
                if not is_char_boundary(text, offset):
                    raise BoundaryError('intraline range splits a UTF-8 character at %d' % offset,
                                        annotation=ann, offset=offset)
            rv.append(ann._replace(start=start, end=end))
    return rv


def _exceeds_limits(block, lines, text, config):
    max_lines = getattr(config, 'intraline_max_block_lines', -1)
    if max_lines >= 0 and (block.delete_end - block.delete_start
                           + block.insert_end - block.insert_start) > max_lines:
        return True
    max_length = getattr(config, 'intraline_max_line_length', -1)
    if max_length >= 0:
        for line in lines[block.delete_start:block.insert_end]:
            if len(line.body(text)) > max_length:
                return True
    return False


def intraline_annotations(block, lines, text, config=None):
    """
    Intraline annotations for one replace block, in hunk text offsets.

    Blocks with an empty side, blocks ended by a hunk header, and blocks over
    the configured limits get none.
    """
    config = config or HighlightConfig()
    if not getattr(config, 'intraline', True) or not block.is_replace:
        return []
    if block.closed_by_header:
        log.debug('skipping intraline diff for block closed by a header %r', block)
        return []
    if _exceeds_limits(block, lines, text, config):
        log.debug('skipping intraline diff for oversized block %r', block)
        return []
    left = BlockContent(block.delete_lines(lines), text)
    right = BlockContent(block.insert_lines(lines), text)
    left_anns, right_anns = IntralineDiffer(config).diff(left, right)
    return translate(left_anns, left, text) + translate(right_anns, right, text)
