# -*- coding: utf-8 -*-
"""
Funciones utilitarias para highlightdiff.
"""
from genshi.core import Markup, escape


def to_bytes(text):
    """Return the UTF-8 encoding of `text`, or `text` itself if already bytes."""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    return text.encode('utf-8')


def escape_html(text, quotes=True):
    """
    Escape diff content for literal inclusion in HTML.

    genshi's escape() handles &, <, > and the double quote; the single quote is
    escaped here as well so content is safe inside either attribute style.
    Already escaped Markup is returned unchanged.
    """
    if isinstance(text, Markup):
        return text
    rv = escape(text, quotes=quotes)
    if quotes and u"'" in rv:
        rv = Markup(rv.replace(u"'", u'&#39;'))
    return rv


def escape_bytes(data, quotes=True):
    """Decode a byte slice of the hunk text and escape it."""
    return escape_html(data.decode('utf-8', 'replace'), quotes=quotes)


def is_continuation_byte(value):
    return value & 0xC0 == 0x80


def is_char_boundary(data, offset):
    """
    True when `offset` does not fall inside a multi-byte UTF-8 sequence.

    Offsets equal to len(data) are boundaries; offsets outside the data are not.
    """
    if offset < 0 or offset > len(data):
        return False
    if offset == len(data):
        return True
    return not is_continuation_byte(data[offset])


def byte_offsets(text):
    """
    Map character offsets of `text` to byte offsets of its UTF-8 encoding.

    Returns a list of len(text) + 1 entries. Undecodable bytes carried as lone
    surrogates (surrogateescape) count as one byte each.
    """
    offsets = [0]
    total = 0
    for ch in text:
        total += len(ch.encode('utf-8', 'surrogateescape'))
        offsets.append(total)
    return offsets
