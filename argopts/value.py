"Deferred conversion of command-line values to Python types."

# please leave this copyright notice in binary distributions.
license = """
argopts/value.py
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

import builtins
import os

import big.all as big

from . import ConfigurationError, InvalidValueError, MissingValueError


##
## Converters turn the (stripped) text of a value into a Python object.
## By default the requested type is its own converter: int("42"),
## float("3.1415"), and so on.  A converter reports bad input by
## raising ValueError; ValueCell turns that into an InvalidValueError.
##
## Python's numeric constructors are locale-independent, tolerate
## surrounding whitespace, and reject trailing garbage ("3.1415" isn't
## an int, "12abc" isn't anything).  The numeric converters below
## are stricter still.
##

true_strings = frozenset(("1", "true", "yes", "on"))
false_strings = frozenset(("0", "false", "no", "off"))

def parse_bool(s):
    folded = s.lower()
    if folded in true_strings:
        return True
    if folded in false_strings:
        return False
    raise ValueError(f"invalid literal for bool(): {s!r}")

##
## Python's numeric constructors are a little too generous:
## they accept "1_000" and non-ASCII digits like "٤٢".
## A command-line number is plain ASCII without digit grouping.
##
def _plain_number(type):
    def parse(s):
        if (not s.isascii()) or ("_" in s):
            raise ValueError(f"invalid literal for {type.__name__}(): {s!r}")
        return type(s)
    parse.__name__ = f"parse_{type.__name__}"
    return parse

parse_int = _plain_number(int)
parse_float = _plain_number(float)
parse_complex = _plain_number(complex)

converters = {
    bool: parse_bool,
    int: parse_int,
    float: parse_float,
    complex: parse_complex,
    }

conversion_exceptions = (ValueError, TypeError, ArithmeticError)


def register_converter(type, converter):
    """
    Registers "converter" as the function used to convert
    text to "type".  The converter is called with a single
    str argument, and should raise ValueError if the text
    isn't a legal value.
    """
    if not callable(converter):
        raise ConfigurationError(f"register_converter(): converter {converter!r} isn't callable")
    converters[type] = converter

def converter_for(type):
    return converters.get(type, type)

def type_name(type):
    return getattr(type, '__name__', None) or repr(type)


class Conversion:
    """
    The result of ValueCell.convert().

    A Conversion is true if the conversion succeeded, in which
    case "value" holds the converted value.  Otherwise "error"
    holds the (unraised) MissingValueError or InvalidValueError.
    """
    __slots__ = ('value', 'error')

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    def __repr__(self):
        if self.error is not None:
            return f"<Conversion error={self.error!r}>"
        return f"<Conversion value={self.value!r}>"

    def __bool__(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value


class ValueCell:
    """
    Holds the text of a single command-line value, and converts
    it to whatever type you ask for, when you ask for it.

    "value" is the text.  None means no text was ever attached.
    Anything that isn't a str is rendered to text: bytes are
    decoded with os.fsdecode(), everything else goes through str().

    "usage" is the display form of the option this value belongs
    to (e.g. "-f, --file").  If supplied, conversion errors mention
    it; otherwise they're less specific.

    Note: an empty string counts as missing.  So you can't tell
    "--file=" apart from a "--file" with nothing after it.
    """
    __slots__ = ('_text', '_usage')

    def __init__(self, value=None, *, usage=None):
        if value is None:
            text = None
        elif isinstance(value, str):
            text = value
        elif isinstance(value, ValueCell):
            text = value.text
        elif isinstance(value, (bytes, bytearray)):
            text = os.fsdecode(bytes(value))
        else:
            text = str(value)
        self._text = text
        self._usage = usage

    @property
    def text(self):
        return self._text

    @property
    def usage(self):
        return self._usage

    @property
    def present(self):
        "True if any text, even an empty string, was attached."
        return self._text is not None

    def __repr__(self):
        if self._usage:
            return f"<ValueCell {self._text!r} usage={self._usage!r}>"
        return f"<ValueCell {self._text!r}>"

    def convert(self, type=str):
        """
        Converts the text to "type", returning a Conversion.
        Never raises for a missing or invalid value; inspect
        the Conversion (or call its unwrap() method) instead.

        "type" may be any callable that accepts a str,
        like the converters returned by split() and validate().
        """
        name = type_name(type)
        if not self._text:
            return Conversion(error=MissingValueError(name, usage=self._usage))
        if type is str:
            return Conversion(self._text)
        converter = converter_for(type)
        try:
            value = converter(self._text.strip())
        except conversion_exceptions:
            return Conversion(error=InvalidValueError(self._text, name, usage=self._usage))
        return Conversion(value)

    def get(self, type=str):
        """
        Converts the text to "type" and returns it.
        Raises MissingValueError or InvalidValueError on failure.
        """
        return self.convert(type).unwrap()

    def __str__(self):
        return self.get(str)

    def __int__(self):
        return self.get(int)

    def __float__(self):
        return self.get(float)

    def __complex__(self):
        return self.get(complex)


def split(*separators, strip=False, type=str):
    """
    Creates a converter that splits a value on one or
    more separator strings, converting each field to "type".

    If you don't supply any separators, splits on
    any whitespace.

    If strip is True, also strips the separators
    from the beginning and end of the value.
    """
    if not all((s and isinstance(s, str)) for s in separators):
        raise ConfigurationError("split(): every separator must be a non-empty string")
    convert = converter_for(type)

    def split(s):
        return [convert(field) for field in big.multisplit(s, separators or None, strip=strip)]
    split.__name__ = f"list[{type_name(type)}]"
    return split


def validate(*values, type=None):
    """
    Creates a converter that only permits one of "values".

    "type" is the type of the value.  If not specified,
    it defaults to builtins.type(values[0]).
    """
    if not values:
        raise ConfigurationError("validate() called without any values.")
    if type is None:
        type = builtins.type(values[0])
    failed = [value for value in values if not isinstance(value, type)]
    if failed:
        failed = " ".join(repr(x) for x in failed)
        raise ConfigurationError(f"validate() called with these non-homogeneous values {failed}")

    convert = converter_for(type)
    values_set = set(values)
    def validate(s):
        value = convert(s)
        if value not in values_set:
            raise ValueError(f"illegal value {value!r}, should be one of {' '.join(repr(v) for v in values)}")
        return value
    validate.__name__ = f"{type_name(type)} (one of {' '.join(repr(v) for v in values)})"
    return validate


def validate_range(start, stop=None, *, type=None, clamp=False):
    """
    Creates a converter that only permits values
    within a range.

        start and stop are like the start and stop
            arguments for range(), except values
            can be less-than *or equal to* stop.

        type is the type for the value.  If unspecified,
            it defaults to builtins.type(start).

    If the value is outside the range and clamp is true,
    the converter returns whichever of start and stop
    is nearest.  Otherwise the value is invalid.
    """
    if type is None:
        type = builtins.type(start)

    if stop is None:
        stop = start
        start = type()
        # ensure start is < stop
        if start > stop:
            start, stop = stop, start

    convert = converter_for(type)
    def validate_range(s):
        value = convert(s)
        if not (start <= value <= stop):
            if not clamp:
                raise ValueError(f"illegal value {value}, should be {start} <= value <= {stop}")
            value = stop if value >= stop else start
        return value
    validate_range.__name__ = f"{type_name(type)} ({start} to {stop})"
    return validate_range
