# -*- coding: utf-8 -*-
"""
Highlighting of one printed hunk.
"""
import logging

from .annotation import Annotation, merge_annotations
from .blocks import find_replace_blocks
from .config import HighlightConfig
from .intraline import intraline_annotations
from .scanner import OTHER, scan_lines
from .splicer import splice
from .utils import to_bytes

log = logging.getLogger(__name__)


def highlight(hunk_text, config=None):
    """
    Highlights a printed hunk, returning the annotated HTML as Markup.

    Raises a HighlightError instead of returning partially highlighted output.
    """
    return HunkHighlighter(hunk_text, config=config).render()


class HunkHighlighter(object):
    """Collects the annotations for one hunk and splices them into its text."""

    def __init__(self, hunk_text, config=None):
        self.config = config or HighlightConfig()
        self.text = to_bytes(hunk_text)
        self.lines = scan_lines(self.text, self.config)
        self.blocks = find_replace_blocks(self.lines)

    def _wrap(self, start, end, left):
        return Annotation(start, end, left, self.config.close_markup, want_inner=False)

    def header_annotations(self):
        """Background-only spans for hunk headers and other metadata lines."""
        return [self._wrap(line.start, line.end, self.config.header_open)
                for line in self.lines
                if line.marker == OTHER and line.end > line.start]

    def background_annotations(self):
        """One span per non-empty delete run and per non-empty insert run."""
        rv = []
        for block in self.blocks:
            if block.has_deletes:
                lines = block.delete_lines(self.lines)
                rv.append(self._wrap(lines[0].start, lines[-1].end, self.config.delete_open))
            if block.has_inserts:
                lines = block.insert_lines(self.lines)
                rv.append(self._wrap(lines[0].start, lines[-1].end, self.config.insert_open))
        return rv

    def annotations(self):
        """All annotations for the hunk, sorted and validated."""
        anns = self.header_annotations() + self.background_annotations()
        for block in self.blocks:
            anns.extend(intraline_annotations(block, self.lines, self.text, self.config))
        log.debug('hunk of %d lines: %d blocks, %d annotations',
                  len(self.lines), len(self.blocks), len(anns))
        return merge_annotations(self.text, anns)

    def render(self):
        return splice(self.text, self.annotations(),
                      quotes=getattr(self.config, 'escape_quotes', True))
