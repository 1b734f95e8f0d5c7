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
This module contains the exception classes of the package.
"""
from typing import Any, Optional


class XMLLimitsException(Exception):
    """The base class of all xmllimits specific errors."""


class XMLLimitsAttributeError(XMLLimitsException, AttributeError):
    pass


class XMLLimitsTypeError(XMLLimitsException, TypeError):
    pass


class XMLLimitsValueError(XMLLimitsException, ValueError):
    pass


class XMLLimitsNumberError(XMLLimitsValueError):
    """
    Raised when the setting of a limit is not a valid integer.

    :param message: the error message.
    :param name: the name of the property that has the malformed setting.
    :param value: the malformed value.
    """
    def __init__(self, message: str, name: Optional[str] = None, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.name = name
        self.value = value

    def __str__(self) -> str:
        return self.message


__all__ = ['XMLLimitsException', 'XMLLimitsAttributeError', 'XMLLimitsTypeError',
           'XMLLimitsValueError', 'XMLLimitsNumberError']
