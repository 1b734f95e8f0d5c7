#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
Diagnostics about parsers that don't support a protection property.
Each warning is printed only once for a parser and a property.
"""
import sys
import threading
from typing import Optional, TextIO, Union

__all__ = ['PrintedWarnings', 'printed_warnings', 'print_warning']


class PrintedWarnings:
    """
    A thread-safe, append-only, set of the couples (parser class name,
    property name) for which a warning has been printed.
    """
    def __init__(self) -> None:
        self._keys: set[tuple[str, str]] = set()
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, sorted(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def add_if_absent(self, parser_class_name: str, property_name: str) -> bool:
        """
        Adds a key to the set. Returns `True` if the key is added, `False`
        if the key was already in the set.
        """
        key = parser_class_name, property_name
        with self._lock:
            if key in self._keys:
                return False
            self._keys.add(key)
            return True

    def discard(self, parser_class_name: str, property_name: str) -> None:
        with self._lock:
            self._keys.discard((parser_class_name, property_name))

    def clear(self) -> None:
        with self._lock:
            self._keys.clear()


printed_warnings = PrintedWarnings()
"""The warnings printed by the current process."""


def print_warning(parser_class_name: str,
                  property_name: str,
                  error: Union[str, Exception],
                  warnings: Optional[PrintedWarnings] = None,
                  stream: Optional[TextIO] = None) -> bool:
    """
    Prints out a warning if a parser does not support the specified
    feature or property. The warning is printed only the first time.

    :param parser_class_name: the name of the parser class.
    :param property_name: the property name.
    :param error: the error raised by the parser or a message.
    :param warnings: the set of printed warnings, for default the set of \
    the warnings printed by the process.
    :param stream: the output stream, for default `sys.stderr`.
    :return: `True` if the warning is printed, `False` otherwise.
    """
    if warnings is None:
        warnings = printed_warnings
    if not warnings.add_if_absent(parser_class_name, property_name):
        return False

    if stream is None:
        stream = sys.stderr
    try:
        stream.write(f"Warning: {parser_class_name}: {error}\n")
    except Exception:
        # not printed, so a later call can retry
        warnings.discard(parser_class_name, property_name)
        raise
    return True
