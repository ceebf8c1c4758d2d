import itertools

# please leave this copyright notice in binary distributions.
license = """
argopts/text.py
part of the ArgOpts software package
Copyright 2026 by the ArgOpts contributors
All rights reserved.

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included
in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""


def wrap_words(words, margin=79, *, two_spaces=True):
    """
    Combines "words" into lines and returns them as a list of strings.

    "words" should be an iterable of pre-split words.

    "margin" specifies the maximum length of each line.
    A word longer than margin gets a line to itself.

    If "two_spaces" is true, words that end in sentence-ending
    punctuation ('.', '?', and '!') will be followed by two spaces,
    not one.
    """
    lines = []
    line = []
    col = 0
    lastword = ''

    for word in words:
        if two_spaces and lastword.endswith(('.', '?', '!')):
            space = "  "
        else:
            space = " "

        if col and ((col + len(space) + len(word)) > margin):
            lines.append("".join(line))
            line.clear()
            col = 0

        if col:
            line.append(space)
            col += len(space)

        line.append(word)
        col += len(word)
        lastword = word

    if line:
        lines.append("".join(line))
    return lines


def format_table(rows, *, margin=79, indent=0, column_spacing=2, max_left_width=24):
    """
    Formats "rows", an iterable of (left, right) string pairs,
    as two columns.  The right column is word-wrapped so no line
    is longer than "margin".

    The left column is as wide as its widest entry no wider
    than "max_left_width".  A left entry that doesn't fit
    gets a line to itself, and its right entry starts on the
    next line.  With margin=46 and max_left_width=13:

        -v, --verbose  Causes the program to produce
                       more output.
        -x, --extremely-long-option-name
                       Does something.
    """
    rows = list(rows)
    if not rows:
        return ""

    left_width = max((len(left) for left, _ in rows if len(left) <= max_left_width), default=max_left_width)
    right_column = indent + left_width + column_spacing
    right_width = max(margin - right_column, 1)
    left_indent = " " * indent
    right_indent = " " * right_column

    lines = []
    for left, right in rows:
        wrapped = wrap_words(right.split(), right_width)
        if len(left) > left_width:
            lines.append(left_indent + left)
            first = right_indent
        else:
            first = left_indent + left.ljust(left_width + column_spacing)
        for prefix, line in zip(itertools.chain((first,), itertools.repeat(right_indent)), wrapped):
            lines.append((prefix + line).rstrip())
        if not wrapped and (len(left) <= left_width):
            lines.append((left_indent + left).rstrip())

    return "\n".join(lines)
