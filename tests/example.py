#!/usr/bin/env python3


# part of the ArgOpts software package
# Copyright 2026 by the ArgOpts contributors
# All rights reserved.
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

import os
import sys

argopts_root = os.environ.get("ARGOPTS_ROOT")
if argopts_root:
    sys.path.insert(0, argopts_root)

import argopts


parser = argopts.Parser([
    ('h', "help", "print help message"),
    ('v', "verbose", "print more"),
    ('f', "file", "read from this file"),
    ('j', "jobs", "number of jobs to run in parallel"),
    ])


def main(argv):
    options = parser.parse(argv)

    # first check for help
    for opt in options:
        if opt.short == 'h':
            print(parser.usage(argv[0]))
            return 0

    for opt in options:
        try:
            if opt.short == 'v':
                print("Verbose")
            elif opt.short == 'f':
                print(f"Using file: '{opt.arg}'")
            elif opt.short == 'j':
                print(f"Using {int(opt.arg)} jobs")
            else:
                print(f"Unknown option {opt.usage}")
        except argopts.UsageError as e:
            print(e, end="", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
