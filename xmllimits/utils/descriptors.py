#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from dataclasses import is_dataclass
from typing import Any, cast, Generic, Optional, TypeVar, Union

from xmllimits.exceptions import XMLLimitsAttributeError, XMLLimitsTypeError
from xmllimits.translation import gettext as _
from xmllimits.utils.logger import get_logging_level

__all__ = ['Option', 'BooleanOption', 'LogLevelOption']

T = TypeVar('T')


class Option(Generic[T]):
    """
    A descriptor for handling validated options. If bound to a dataclass
    the option can be changed, otherwise it's considered a read-only
    optional argument.

    :param default: The default value for the option.
    """
    __slots__ = ('_name', '_owner', '_default')

    def __init__(self, *, default: T) -> None:
        self._default = default

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self._name = f'_{name}'
        self._owner = owner

    def __str__(self) -> str:
        if is_dataclass(self._owner):
            return _('option {!r}').format(self._name[1:])
        return _('optional argument {!r}').format(self._name[1:])

    def __get__(self, instance: Optional[Any], owner: type[Any]) -> T:
        try:
            return cast(T, getattr(instance, self._name))
        except AttributeError:
            return self._default

    def __set__(self, instance: Any, value: Any) -> None:
        if hasattr(instance, self._name) and not is_dataclass(self._owner):
            raise XMLLimitsAttributeError(_("can't change {}").format(self))
        setattr(instance, self._name, self.validated_value(value))

    def __delete__(self, instance: Any) -> None:
        raise XMLLimitsAttributeError(_("can't delete {}").format(self))

    def validated_value(self, value: Any) -> T:
        return cast(T, value)


class BooleanOption(Option[bool]):
    def validated_value(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        msg = _("invalid type {!r} for {}, must be of type {!r}")
        raise XMLLimitsTypeError(msg.format(type(value), self, bool))


class LogLevelOption(Option[Union[None, str, int]]):
    def validated_value(self, value: Any) -> Union[None, str, int]:
        if value is None:
            return None
        elif isinstance(value, bool) or not isinstance(value, (str, int)):
            msg = _("invalid type {!r} for {}, must be None, a str or an int")
            raise XMLLimitsTypeError(msg.format(type(value), self))

        get_logging_level(value)  # raises XMLLimitsValueError if invalid
        return cast(Union[str, int], value)
