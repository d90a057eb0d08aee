from __future__ import annotations

import logging

from highlightdiff import FileDiff, HighlightConfig, InvariantError, parse_file_diffs
from highlightdiff import filediff

MODIFIED = """\
diff --git a/foo.txt b/foo.txt
--- a/foo.txt
+++ b/foo.txt
@@ -1,3 +1,3 @@
 keep
-old <line>
+new <line>
 tail
@@ -10,2 +10,2 @@
-x = 1
+x = 2
 end
"""

RENAMED = """\
--- a/old.txt
+++ b/new.txt
@@ -1 +1 @@
-a
+b
"""

ADDED = """\
--- /dev/null
+++ b/added.txt
@@ -0,0 +1,2 @@
+one
+two
"""

REMOVED = """\
--- a/gone.txt
+++ /dev/null
@@ -1 +0,0 @@
-bye
"""


def _single(diff_text, config=None):
    [file_diff] = parse_file_diffs(diff_text, config=config)
    return file_diff


def test_titles():
    assert _single(MODIFIED).title() == 'foo.txt'
    assert _single(RENAMED).title() == 'old.txt -&gt; new.txt'
    assert _single(ADDED).title() == 'added.txt'
    assert _single(REMOVED).title() == '<strikethrough>gone.txt</strikethrough>'


def test_multi_file_diff_keeps_order():
    names = [f.new_name for f in parse_file_diffs(MODIFIED + RENAMED + ADDED)]
    assert names == ['foo.txt', 'new.txt', 'added.txt']


def test_each_hunk_is_highlighted():
    file_diff = _single(MODIFIED)
    assert len(file_diff.hunk_texts()) == 2
    out = file_diff.diff()
    assert out.count('<span class="gu">@@') == 2
    assert '<span class="gd input-block">-' in out
    assert '<span class="gi input-block">+' in out
    assert 'old &lt;line&gt;' not in out  # the changed word is wrapped
    assert '&lt;line&gt;' in out
    assert ' keep\n' in out


def test_added_file_is_one_insert_run():
    out = _single(ADDED).diff()
    assert '<span class="gi input-block">+one\n+two\n</span>' in out
    assert 'gd input-block' not in out


def test_failed_hunk_is_flagged_and_the_rest_survives(monkeypatch, caplog):
    real_highlight = filediff.highlight
    calls = []

    def flaky(text, config=None):
        calls.append(text)
        if len(calls) == 1:
            raise InvariantError('boom')
        return real_highlight(text, config=config)

    monkeypatch.setattr(filediff, 'highlight', flaky)
    with caplog.at_level(logging.WARNING, logger='highlightdiff.filediff'):
        out = _single(MODIFIED).diff()

    assert out.startswith('<span class="hunk-error">@@ -1,3 +1,3 @@')
    assert 'old &lt;line&gt;' in out
    assert '<span class="gi input-block">+x = ' in out
    assert 'could not highlight hunk of foo.txt' in caplog.text


def test_error_class_is_configurable(monkeypatch):
    def failing(text, config=None):
        raise InvariantError('boom')

    monkeypatch.setattr(filediff, 'highlight', failing)
    out = _single(RENAMED, config=HighlightConfig(error_class='broken')).diff()
    assert out.startswith('<span class="broken">')
    assert out.endswith('</span>')


def test_config_reaches_highlighting():
    out = _single(RENAMED, config=HighlightConfig(intraline=False)).diff()
    assert '<span class="x">' not in out
    assert isinstance(_single(RENAMED), FileDiff)
