# -*- coding: utf-8 -*-
"""
File-level rendering on top of a unified diff parser.

Parsing is delegated to `unidiff`; each hunk's printed text is highlighted on
its own so a failure only costs that hunk its highlighting.
"""
import logging

from genshi.core import Markup
from unidiff import PatchSet

from .config import HighlightConfig
from .errors import HighlightError
from .highlighter import highlight
from .utils import escape_html

log = logging.getLogger(__name__)

DEV_NULL = '/dev/null'


def _strip_prefix(name, prefix):
    if name.startswith(prefix):
        return name[len(prefix):]
    return name


def parse_file_diffs(diff_text, config=None):
    """Parse a (multi-file) unified diff into FileDiff objects."""
    config = config or HighlightConfig()
    return [FileDiff(patched_file, config=config) for patched_file in PatchSet(diff_text)]


class FileDiff(object):
    """One file of a parsed diff, for display purposes."""

    def __init__(self, patched_file, config=None):
        self.patched_file = patched_file
        self.config = config or HighlightConfig()

    @property
    def old_name(self):
        return _strip_prefix(self.patched_file.source_file, 'a/')

    @property
    def new_name(self):
        return _strip_prefix(self.patched_file.target_file, 'b/')

    def title(self):
        old, new = self.old_name, self.new_name
        if old != DEV_NULL and new != DEV_NULL and old == new:  # Modified.
            return escape_html(new)
        if old != DEV_NULL and new != DEV_NULL:  # Renamed.
            return escape_html(old + u' -> ' + new)
        if old == DEV_NULL and new != DEV_NULL:  # Added.
            return escape_html(new)
        if old != DEV_NULL and new == DEV_NULL:  # Removed.
            return Markup(u'<strikethrough>%s</strikethrough>' % escape_html(old))
        raise ValueError('unexpected file diff: %r' % (self.patched_file,))

    def hunk_texts(self):
        return [str(hunk) for hunk in self.patched_file]

    def render_hunk(self, hunk_text):
        """
        Highlight one hunk; on failure fall back to escaped plain text inside
        an element flagged with `config.error_class`.
        """
        try:
            return highlight(hunk_text, config=self.config)
        except HighlightError as exc:
            log.warning('could not highlight hunk of %s: %s', self.new_name, exc)
            return Markup(u'<span class="%s">%s</span>'
                          % (escape_html(self.config.error_class), escape_html(hunk_text)))

    def diff(self):
        return Markup(u''.join(self.render_hunk(text) for text in self.hunk_texts()))
