# -*- coding: utf-8 -*-
"""
Replace-block detection.

A replace block is a run of deleted lines directly followed by a run of
inserted lines ("this became that"). Either run may be empty.
"""
from collections import namedtuple

from .scanner import DELETE, INSERT


class ReplaceBlock(namedtuple('ReplaceBlock',
                              'delete_start delete_end insert_start insert_end closed_by_header',
                              defaults=(False,))):
    """
    Line index ranges (end-exclusive) of one block's delete and insert runs.

    The delete run always ends where the insert run begins.
    `closed_by_header` is set when a hunk header line ended the block.
    """
    __slots__ = ()

    @property
    def ranges(self):
        return self[:4]

    @property
    def has_deletes(self):
        return self.delete_end > self.delete_start

    @property
    def has_inserts(self):
        return self.insert_end > self.insert_start

    @property
    def is_replace(self):
        """Both sides are non-empty, so an intraline diff makes sense."""
        return self.has_deletes and self.has_inserts

    def delete_lines(self, lines):
        return lines[self.delete_start:self.delete_end]

    def insert_lines(self, lines):
        return lines[self.insert_start:self.insert_end]


def find_replace_blocks(lines):
    """
    Group the classified lines into replace blocks, scanning once.

    Any line that is neither a delete nor an insert closes the open block, and
    so does the end of the input. A delete line seen while an insert run is
    already open also closes the block and opens a fresh one, so a block's
    delete run only ever holds delete lines and precedes its insert run.
    """
    blocks = []
    del_start = None
    ins_start = None

    def close(index, header=False):
        if del_start is None and ins_start is None:
            return
        if del_start is None:
            # Pure insertion: empty delete run right before the inserts.
            blocks.append(ReplaceBlock(ins_start, ins_start, ins_start, index, header))
        elif ins_start is None:
            # Pure deletion: empty insert run where the deletes stop.
            blocks.append(ReplaceBlock(del_start, index, index, index, header))
        else:
            blocks.append(ReplaceBlock(del_start, ins_start, ins_start, index, header))

    for line in lines:
        if line.marker == DELETE:
            if ins_start is not None:
                close(line.index)
                ins_start = None
                del_start = None
            if del_start is None:
                del_start = line.index
        elif line.marker == INSERT:
            if ins_start is None:
                ins_start = line.index
        else:
            close(line.index, line.header)
            del_start = ins_start = None

    close(len(lines))
    return blocks
