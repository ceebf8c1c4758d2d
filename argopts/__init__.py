#!/usr/bin/env python3

"A small command-line option tokenizer, with option values converted to any type on demand."
__version__ = "0.1.0"


# please leave this copyright notice in binary distributions.
license = """
argopts/__init__.py
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


import big.all as big
import collections
import os
from os.path import basename
import string
import sys


__all__ = [
    'ArgOptsBaseException',
    'ConfigurationError',
    'UsageError',
    'MissingValueError',
    'InvalidValueError',
    'Option',
    'Occurrence',
    'Parser',
    'parse',
    'ValueCell',
    'Conversion',
    'register_converter',
    'split',
    'validate',
    'validate_range',
    ]


class ArgOptsBaseException(Exception):
    pass

class ConfigurationError(ArgOptsBaseException):
    """
    Raised when the ArgOpts API is used improperly.
    """
    pass


class UsageError(ArgOptsBaseException):
    """
    Raised when ArgOpts processes an invalid command-line.
    """
    pass

class MissingValueError(UsageError):
    """
    Raised when a value was requested from an option,
    but no value text was ever attached to it.
    """
    def __init__(self, type_name, *, usage=None):
        self.type_name = type_name
        self.usage = usage
        if usage:
            message = f"Missing argument, expected type {type_name}\nusage: {usage}\n"
        else:
            message = f"missing value, expected type {type_name}"
        super().__init__(message)

class InvalidValueError(UsageError):
    """
    Raised when the text attached to an option couldn't
    be converted to the requested type.
    """
    def __init__(self, text, type_name, *, usage=None):
        self.text = text
        self.type_name = type_name
        self.usage = usage
        if usage:
            message = f"Invalid argument: expected type {type_name} but got '{text}'\nusage: {usage}\n"
        else:
            message = f"invalid value {text!r} for type {type_name}"
        super().__init__(message)


# value.py imports the exceptions above.
from . import text
from .value import ValueCell, Conversion, register_converter, split, validate, validate_range


def format_usage(short, long):
    """
    Returns the display form of an option:
        "-v, --verbose", "-v", or "--verbose".
    """
    fields = []
    if short:
        fields.append("-" + short)
    if long:
        fields.append("--" + long)
    if not fields:
        # only reachable with "--=value" on the command-line
        return "--"
    return ", ".join(fields)


class Option(collections.namedtuple('Option', 'short long help')):
    """
    A command-line option you'd like Parser to recognize.

    "short" is a single character, or None if the option
    has no short form.  "long" is a string, or an empty
    string if the option has no long form.  "help" is
    a short help message.
    """
    __slots__ = ()

    def __new__(cls, short=None, long='', help=''):
        if short == '':
            short = None
        if short is not None:
            if not (isinstance(short, str) and (len(short) == 1)):
                raise ConfigurationError(f"short option must be a single character, not {short!r}")
            if short in "-=":
                raise ConfigurationError(f"{short!r} can't be used as a short option")
        if long is None:
            long = ''
        if not isinstance(long, str):
            raise ConfigurationError(f"long option must be a str, not {long!r}")
        if long.startswith("-"):
            raise ConfigurationError(f"long option {long!r} must not start with a dash")
        if "=" in long:
            raise ConfigurationError(f"long option {long!r} must not contain '='")
        if not (short or long):
            raise ConfigurationError("option must have a short name, a long name, or both")
        if not isinstance(help, str):
            raise ConfigurationError(f"help for {format_usage(short, long)} must be a str, not {help!r}")
        return super().__new__(cls, short, long, help)

    @property
    def usage(self):
        return format_usage(self.short, self.long)


class Occurrence(collections.namedtuple('Occurrence', 'short long help index matched arg')):
    """
    One option found on the command-line.

    short, long, and help are copied from the matching
    Option.  If the option wasn't recognized, "matched"
    is false, help is empty, and only the name actually
    used on the command-line is set.

    "index" is the index into argv where the option appeared.
    "arg" is a ValueCell holding the text that followed the
    option--either the "=value" part, or the next argument.
    Parser doesn't know whether an option takes a value,
    so every option gets one if there's one to give.

    Like Option, an Occurrence is immutable.
    """
    __slots__ = ()

    def __new__(cls, short, long, help, index, value=None, *, matched=False):
        arg = ValueCell(value, usage=format_usage(short, long))
        return super().__new__(cls, short, long, help, index, matched, arg)

    @property
    def usage(self):
        return format_usage(self.short, self.long)

    def __repr__(self):
        matched = "" if self.matched else " unmatched"
        return f"<Occurrence {self.usage} index={self.index}{matched} arg={self.arg.text!r}>"


class Parser:
    """
    Command-line option parser.

    Matches short options like "-h" and "-v", and long options
    like "--help" and "--verbose".  Short options can be combined,
    so "-hvv" is equivalent to "-h -v -v".  Values can be attached
    with "=", as in "-f=foo" and "--file=foo".

    Parsing stops at "--".

        parser = argopts.Parser([
            ('h', "help", "print help message"),
            ('v', "verbose", "print more"),
            ])

        for opt in parser.parse(sys.argv):
            if opt.short == 'h':
                print(parser.usage())
            elif opt.long == 'jobs':
                jobs = int(opt.arg)

    Options Parser doesn't know about are returned too,
    with "matched" set to False; it's up to you whether
    that's an error.

    Keyword-only configuration:

        negative_numbers: if true (the default), an argument
            like "-3" is a number, not a short option.

        short_option_equals_oparg: if true (the default),
            "-abc=value" attaches "value" to the short options.
    """

    def __init__(self, options=(), *, negative_numbers=True, short_option_equals_oparg=True):
        self.options = []
        self.short_options = {}
        self.long_options = {}

        self.negative_numbers = negative_numbers
        self.short_option_equals_oparg = short_option_equals_oparg

        self.log = big.Log()

        for option in options:
            if isinstance(option, Option):
                self.append(option)
            else:
                self.add(*option)

    def __repr__(self):
        return f"<Parser options={self.options!r}>"

    def __len__(self):
        return len(self.options)

    def __iter__(self):
        return iter(self.options)

    def __contains__(self, name):
        if isinstance(name, Option):
            return name in self.options
        return (name in self.short_options) or (name in self.long_options)

    def add(self, short=None, long='', help=''):
        """
        Adds a command-line option to match, and returns it.

            short is a single character, or None for no short name.
            long is a longer name for the same option, or an empty
                string for no long name.
            help is a short help message describing the option.
        """
        return self.append(Option(short, long, help))

    def append(self, option):
        if not isinstance(option, Option):
            raise ConfigurationError(f"append(): {option!r} isn't an Option")
        if option.short and (option.short in self.short_options):
            raise ConfigurationError(f"multiple definitions of option -{option.short}")
        if option.long and (option.long in self.long_options):
            raise ConfigurationError(f"multiple definitions of option --{option.long}")
        self.options.append(option)
        if option.short:
            self.short_options[option.short] = option
        if option.long:
            self.long_options[option.long] = option
        return option

    def find_short(self, c):
        return self.short_options.get(c)

    def find_long(self, name):
        return self.long_options.get(name)

    def format_options(self):
        """
        Returns a formatted string listing the known options,
        one per line:

            -h, --help\t\tprint help message
        """
        return "\n".join(f"{option.usage}\t\t{option.help}" for option in self.options)

    def usage(self, prog=None):
        if prog is None:
            prog = basename(sys.argv[0])
        return f"Usage:\n{prog} [options]\nOptions:\n{self.format_options()}"

    def help(self, margin=79):
        """
        Like format_options(), but lines up the help text
        in a column and word-wraps it to fit in "margin".
        """
        rows = [(option.usage, option.help) for option in self.options]
        return text.format_table(rows, margin=margin)

    def _occurrence(self, option, c, long, index, value):
        if option is not None:
            return Occurrence(option.short, option.long, option.help, index, value, matched=True)
        return Occurrence(c, long, '', index, value)

    def parse(self, argv=None, argc=None):
        """
        Looks for options in argv, as passed to main().
        argv[0] is the command, so it's skipped.

        "argc" is the number of arguments in argv to examine,
        including the command.  It defaults to len(argv).
        Arguments may be str or bytes.

        Returns a list of Occurrence objects, in the order
        in which they appear in the arguments.
        """
        if argv is None:
            argv = sys.argv
        if argc is None:
            argc = len(argv)

        log = self.log = big.Log()
        log("parse start")

        found = []
        append = found.append
        iterator = big.PushbackIterator(enumerate(argv[1:argc], 1))

        def next_argument():
            # peek at the next argument without consuming it.
            # we don't know whether the option wants a value,
            # so the caller can decide whether to use it.
            t = next(iterator, None)
            if t is None:
                return None
            iterator.push(t)
            return os.fsdecode(t[1])

        for index, a in iterator:
            a = os.fsdecode(a)

            # plain text, and the UNIX idiom '-' meaning stdin/stdout.
            if (not a.startswith("-")) or (a == "-"):
                continue

            # "-3" is a negative number, not an option.
            # this must be checked before we count dashes.
            if self.negative_numbers and (a[1] in string.digits):
                continue

            if a == "--":
                log(f"'--' at index {index}, stop scanning")
                break

            log.enter(f"argument {index} {a!r}")

            # split_value is the value we "split" from the option string,
            # e.g. 'X' in '--option=X' and '-o=X'.
            # Note: split_value can be an empty string!  ('-o=')
            # You *must* check "if split_value is None".
            split_value = None

            if a.startswith("--"):
                long, equals, _split_value = a[2:].partition("=")
                if equals:
                    split_value = _split_value
                value = split_value if split_value is not None else next_argument()
                option = self.find_long(long)
                log(f"long option --{long} matched={option is not None} value={value!r}")
                append(self._occurrence(option, None, long, index, value))
            else:
                ## "-abc" is EXACTLY EQUIVALENT to "-a -b -c".
                ## Every character is a separate option, and every
                ## one of them gets the same value.  (Only the last
                ## one would normally use it, but we can't tell.)
                cluster = a[1:]
                if self.short_option_equals_oparg:
                    cluster, equals, _split_value = cluster.partition("=")
                    if equals:
                        split_value = _split_value
                value = split_value if split_value is not None else next_argument()
                for c in cluster:
                    option = self.find_short(c)
                    log(f"short option -{c} matched={option is not None} value={value!r}")
                    append(self._occurrence(option, c, '', index, value))

            log.exit()

        log(f"parse complete, {len(found)} options")
        return found


def parse(argv=None, argc=None, options=()):
    """
    Convenience function: builds a Parser from "options"
    and parses argv with it.
    """
    return Parser(options).parse(argv, argc)
