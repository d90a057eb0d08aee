# -*- coding: utf-8 -*-
"""
Configuración y constantes para highlightdiff.
"""

# Line markers (first byte of a printed diff line)
DELETE_MARKER = b'-'
INSERT_MARKER = b'+'


class HighlightConfig(object):
    """
    Runtime configuration for hunk highlighting.

    Create one per request and pass it explicitly; nothing here is read from
    module-level state.
    """

    # Markup injected around whole delete / insert runs
    delete_open = u'<span class="gd input-block">'
    insert_open = u'<span class="gi input-block">'
    # Markup injected around hunk headers and other metadata lines
    header_open = u'<span class="gu">'
    # Markup injected around changed characters inside a run
    change_open = u'<span class="x">'
    close_markup = u'</span>'

    # First bytes (besides '-' and '+') that mark diff metadata lines
    # ('@@ ... @@' headers and '\ No newline at end of file').
    other_markers = (b'@', b'\\')

    # Metadata lines that start a new hunk. A block closed by one of these
    # keeps its backgrounds but is not diffed character by character.
    header_markers = (b'@',)

    # Character-level diffing between paired delete/insert runs
    intraline = True

    # Matching blocks this short (or shorter) are ignored by the aligner.
    # 0 keeps every match; see CharSequenceMatcher.
    sequence_match_threshold = 0

    # Guardrails so huge blocks do not pay for a character-level diff.
    # When exceeded the block keeps its backgrounds only.
    #  NOTE: a negative limit disables the guardrail.
    intraline_max_block_lines = -1
    intraline_max_line_length = -1

    # Escape " and ' in diff content, not only <, > and &
    escape_quotes = True

    # Class of the wrapper used when a hunk could not be highlighted
    error_class = 'hunk-error'

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if not hasattr(type(self), key):
                raise TypeError('unknown highlight option %r' % key)
            setattr(self, key, value)
