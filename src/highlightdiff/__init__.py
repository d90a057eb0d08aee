# -*- coding: utf-8 -*-
r"""
    highlightdiff
    ~~~~~~~~~~~~~

    Highlights printed unified-diff hunks as HTML.  Removed and added runs get
    a background span, and the characters that actually changed between them
    get an inner span.  Examples:

    >>> from highlightdiff import highlight

    >>> print(highlight('-foo\n+food\n'))
    <span class="gd input-block">-foo
    </span><span class="gi input-block">+foo<span class="x">d</span>
    </span>

    >>> print(highlight('@@ -1 +1 @@\n-a < b\n+a <= b\n'))
    <span class="gu">@@ -1 +1 @@
    </span><span class="gd input-block">-a &lt; b
    </span><span class="gi input-block">+a &lt;<span class="x">=</span> b
    </span>

    :license: BSD, see LICENSE for more details.
"""

# Public API
from .config import HighlightConfig
from .errors import HighlightError, BoundaryError, InvariantError
from .annotation import Annotation, merge_annotations
from .scanner import scan_lines
from .blocks import find_replace_blocks
from .splicer import splice
from .highlighter import HunkHighlighter, highlight
from .filediff import FileDiff, parse_file_diffs

__all__ = [
    'highlight',
    'HunkHighlighter',
    'HighlightConfig',
    'HighlightError',
    'BoundaryError',
    'InvariantError',
    'Annotation',
    'merge_annotations',
    'scan_lines',
    'find_replace_blocks',
    'splice',
    'FileDiff',
    'parse_file_diffs',
]
