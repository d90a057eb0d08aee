from __future__ import annotations

from highlightdiff import HighlightConfig, find_replace_blocks, scan_lines
from highlightdiff.intraline import (
    BlockContent, CharSequenceMatcher, IntralineDiffer,
    intraline_annotations, translate,
)


def _setup(text):
    text = text.encode('utf-8') if isinstance(text, str) else text
    lines = scan_lines(text)
    return text, lines, find_replace_blocks(lines)


def _ranges(anns):
    return [(a.start, a.end) for a in anns]


def test_block_content_strips_markers_and_keeps_newlines():
    text, lines, [block] = _setup('-ab\n-c\n+abc\n')
    left = BlockContent(block.delete_lines(lines), text)
    right = BlockContent(block.insert_lines(lines), text)
    assert left.data == b'ab\nc\n'
    assert right.data == b'abc\n'
    assert left.segments == [(0, 3, 1, 3), (3, 5, 5, 6)]
    assert right.segments == [(0, 4, 8, 11)]


def test_block_content_last_line_without_newline_is_clipped():
    text, lines, [block] = _setup('-a\n+b')
    right = BlockContent(block.insert_lines(lines), text)
    assert right.data == b'b\n'
    assert right.segments == [(0, 2, 4, 5)]
    assert list(right.to_text_ranges(0, 2)) == [(4, 5)]
    # The synthetic newline has nowhere to go.
    assert list(right.to_text_ranges(1, 2)) == []


def test_local_range_across_lines_is_split_per_line():
    text, lines, [block] = _setup('-ab\n-cd\n+x\n')
    left = BlockContent(block.delete_lines(lines), text)
    # "b\nc" in local space spans two lines.
    assert list(left.to_text_ranges(1, 4)) == [(2, 3), (5, 6)]
    assert text[2:3] == b'b'
    assert text[5:6] == b'c'


def test_differ_reports_local_offsets_per_side():
    text, lines, [block] = _setup('-foo\n+food\n')
    left = BlockContent(block.delete_lines(lines), text)
    right = BlockContent(block.insert_lines(lines), text)
    left_anns, right_anns = IntralineDiffer().diff(left, right)
    assert left_anns == []
    assert _ranges(right_anns) == [(3, 4)]
    assert right_anns[0].want_inner


def test_identical_content_has_no_intraline_spans():
    text, lines, [block] = _setup('-foo\n+foo\n')
    assert intraline_annotations(block, lines, text) == []


def test_translated_insert_covers_exactly_the_new_character():
    text, lines, [block] = _setup('-foo\n+food\n')
    anns = intraline_annotations(block, lines, text)
    assert _ranges(anns) == [(9, 10)]
    assert text[9:10] == b'd'


def test_degenerate_alignment_covers_whole_lines():
    text, lines, [block] = _setup('-a\n-b\n+c\n')
    anns = intraline_annotations(block, lines, text)
    assert _ranges(anns) == [(1, 2), (4, 5), (7, 8)]
    assert [text[s:e] for s, e in _ranges(anns)] == [b'a', b'b', b'c']


def test_multibyte_change_is_byte_aligned():
    text, lines, [block] = _setup('-café\n+cafe\n')
    anns = intraline_annotations(block, lines, text)
    assert [text[s:e] for s, e in _ranges(anns)] == ['é'.encode('utf-8'), b'e']


def test_translate_never_emits_marker_bytes():
    text, lines, [block] = _setup('-one\n-two\n+uno\n+dos\n')
    anns = intraline_annotations(block, lines, text)
    markers = {line.start for line in lines}
    for ann in anns:
        assert ann.start not in markers or ann.start == len(text)
        for offset in range(ann.start, ann.end):
            assert offset not in markers


def test_pure_deletion_gets_no_intraline_spans():
    text, lines, [block] = _setup('-a\n-b\n')
    assert intraline_annotations(block, lines, text) == []


def test_intraline_can_be_disabled():
    text, lines, [block] = _setup('-foo\n+food\n')
    assert intraline_annotations(block, lines, text, HighlightConfig(intraline=False)) == []


def test_guardrails_skip_oversized_blocks():
    text, lines, [block] = _setup('-foo\n+food\n')
    assert intraline_annotations(block, lines, text, HighlightConfig(intraline_max_block_lines=1)) == []
    assert intraline_annotations(block, lines, text, HighlightConfig(intraline_max_line_length=3)) == []
    assert intraline_annotations(block, lines, text, HighlightConfig(intraline_max_line_length=4)) != []


def test_matcher_min_match_drops_incidental_matches():
    matcher = CharSequenceMatcher('abcdefgh', 'xbxxxxxh', min_match=2)
    blocks = matcher.get_matching_blocks()
    assert blocks[-1][2] == 0
    assert all(size > 2 for _, _, size in blocks[:-1])


def test_translate_keeps_markup():
    text, lines, [block] = _setup('-ab\n+xb\n')
    left = BlockContent(block.delete_lines(lines), text)
    right = BlockContent(block.insert_lines(lines), text)
    left_anns, _ = IntralineDiffer().diff(left, right)
    [moved] = translate(left_anns, left, text)
    assert (moved.start, moved.end) == (1, 2)
    assert moved.left == HighlightConfig.change_open


def test_matcher_keeps_single_character_matches_by_default():
    blocks = CharSequenceMatcher('abcdefgh', 'xbxxxxxh').get_matching_blocks()
    assert [(m.a, m.b, m.size) for m in blocks] == [(1, 1, 1), (7, 7, 1), (8, 8, 0)]


def test_changed_newline_is_never_marked():
    text, lines, [block] = _setup('-a\n-b\n+c\n')
    for ann in intraline_annotations(block, lines, text):
        assert b'\n' not in text[ann.start:ann.end]


def test_block_closed_by_header_is_not_diffed():
    text, lines, blocks = _setup('-ab\n+ac\n@@ -9 +9 @@\n-xy\n+xz\n')
    closed, last = blocks
    assert closed.closed_by_header
    assert not last.closed_by_header
    assert intraline_annotations(closed, lines, text) == []
    assert [text[a.start:a.end] for a in intraline_annotations(last, lines, text)] == [b'y', b'z']


def test_block_closed_by_no_newline_marker_is_still_diffed():
    text, lines, [block] = _setup('-ab\n+ac\n\\ No newline at end of file\n')
    assert not block.closed_by_header
    assert [text[a.start:a.end] for a in intraline_annotations(block, lines, text)] == [b'b', b'c']
