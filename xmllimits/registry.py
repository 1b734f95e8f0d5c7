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
This module contains the registry of the protection limits of an XML
processing session.
"""
from collections.abc import Iterable, Iterator, Mapping
from typing import Optional, Union

from elementpath import datatypes

from xmllimits.exceptions import XMLLimitsNumberError, XMLLimitsTypeError, \
    XMLLimitsValueError
from xmllimits.translation import gettext as _
from xmllimits.utils.logger import logger, logged
from xmllimits.limits import ENTITY_COUNT_INFO, ENTITY_COUNT_INFO_INDEX, YES, \
    LimitType, Limit, State, get_legacy_name
from xmllimits.config import ConfigLoader, EnvironmentConfig

__all__ = ['LimitRegistry', 'parse_limit_value']


def parse_limit_value(value: Union[str, int], name: Optional[str] = None) -> int:
    """
    Returns the value of a limit from an integer or from a string that has
    the lexical form of an *xs:int*. Negative values are changed to 0.

    :param value: the integer or the string to parse.
    :param name: the name of the setting, used for error messages.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        msg = _("invalid type {!r} for a limit value, must be an int or a str")
        raise XMLLimitsTypeError(msg.format(type(value)))
    elif isinstance(value, str):
        if datatypes.Integer.pattern.match(value) is None:
            msg = _("invalid setting {!r} for property {!r}: not an integer")
            raise XMLLimitsNumberError(msg.format(value, name), name, value)
        try:
            value = int(datatypes.Int(value))
        except ValueError:
            msg = _("invalid setting {!r} for property {!r}: out of range")
            raise XMLLimitsNumberError(msg.format(value, name), name, value) from None

    return value if value > 0 else 0


class LimitRegistry:
    """
    The registry of the protection limits of an XML processing session. For each
    limit the registry keeps the effective value, the state of the setting that
    produced the value and a flag that is set by the first explicit setting.

    A setting is applied only if its state is equal or greater than the state
    of the current value, so a setting of higher precedence can't be overridden
    by later settings of lower precedence. Rejected settings are silently
    ignored.

    A registry is not thread-safe and is meant to be used by a single session.

    :param secure_processing: if `True` limits are initialized with their \
    secure values, otherwise with their default values.
    :param limits: an optional table of limits, for default all the members \
    of :class:`Limit` are managed.
    :param config: the loader of system settings, for default settings are \
    read from environment variables.
    :param legacy_names: optional mapping of old names of system properties, \
    for default :data:`LEGACY_NAMES` is used.
    :param loglevel: optional logging level to apply during the initialization.
    """
    @logged
    def __init__(self, secure_processing: bool = False,
                 limits: Optional[Iterable[LimitType]] = None,
                 config: Optional[ConfigLoader] = None,
                 legacy_names: Optional[Mapping[str, str]] = None,
                 loglevel: Union[None, str, int] = None) -> None:

        self.secure_processing = secure_processing
        self.limits: tuple[LimitType, ...] = tuple(Limit if limits is None else limits)
        self.config = EnvironmentConfig() if config is None else config
        self.legacy_names = legacy_names
        self._ordinals = {id(limit): k for k, limit in enumerate(self.limits)}

        if secure_processing:
            self.values = [limit.secure_value for limit in self.limits]
            self.states = [State.SECURE_PROCESSING] * len(self.limits)
        else:
            self.values = [limit.default_value for limit in self.limits]
            self.states = [State.DEFAULT] * len(self.limits)

        self.is_set_flags = [False] * len(self.limits)
        self.entity_count_info = ''
        self._read_system_properties()

    def __repr__(self) -> str:
        return '%s(secure_processing=%r)' % (self.__class__.__name__, self.secure_processing)

    def __len__(self) -> int:
        return len(self.limits)

    def _read_system_properties(self) -> None:
        for k, limit in enumerate(self.limits):
            if not self._read_system_property(k, limit.system_property):
                # Fallback to the old name of the property, if any
                old_name = get_legacy_name(limit.system_property, self.legacy_names)
                if old_name is not None:
                    self._read_system_property(k, old_name)

    def _read_system_property(self, index: int, name: str) -> bool:
        setting = self.config.get_property(name)
        if setting is None:
            return False

        limit = self.limits[index]
        value, state = setting
        self.values[index] = parse_limit_value(value, limit.system_property)
        self.states[index] = state
        logger.info("Limit %r set to %d from %s %r",
                    limit.key, self.values[index], state.literal, name)
        return True

    def _ordinal(self, limit: LimitType) -> int:
        try:
            return self._ordinals[id(limit)]
        except KeyError:
            msg = _("{!r} is not a limit managed by {!r}")
            raise XMLLimitsValueError(msg.format(limit, self)) from None

    def _set_value(self, index: int, state: State, value: int) -> None:
        if state >= self.states[index]:
            self.values[index] = value
            self.states[index] = state
            self.is_set_flags[index] = True
            logger.debug("Limit %r set to %d by %s",
                         self.limits[index].key, value, state.literal)
        else:
            logger.debug("Setting %d by %s for limit %r ignored, the current "
                         "value is set by %s", value, state.literal,
                         self.limits[index].key, self.states[index].literal)

    def set_secure_processing(self, secure: bool) -> None:
        """
        Sets all the limits to their secure values or to their default values.
        Limits set by a configuration file, an environment variable or an API
        property are not changed.
        """
        self.secure_processing = secure
        for k, limit in enumerate(self.limits):
            if secure:
                self._set_value(k, State.SECURE_PROCESSING, limit.secure_value)
            else:
                self._set_value(k, State.SECURE_PROCESSING, limit.default_value)

    def set_limit(self, property_name: str, state: State, value: Union[str, int]) -> bool:
        """
        Sets a limit by property name and state.

        :param property_name: the API or system property name of the limit.
        :param state: the state of the setting.
        :param value: the value of the setting, an integer or a string.
        :return: `True` if the property is managed by the registry, `False` otherwise.
        """
        index = self.get_index(property_name)
        if index < 0:
            return False
        self.set_limit_by_index(index, state, value)
        return True

    def set_limit_value(self, limit: LimitType, state: State, value: int) -> None:
        """
        Sets the value of a specific limit.

        :param limit: the limit.
        :param state: the state of the setting.
        :param value: the value of the limit.
        """
        if not isinstance(state, State):
            msg = _("invalid type {!r} for state, must be a {!r}")
            raise XMLLimitsTypeError(msg.format(type(state), State))
        elif isinstance(value, bool) or not isinstance(value, int):
            msg = _("invalid type {!r} for a limit value, must be an int")
            raise XMLLimitsTypeError(msg.format(type(value)))
        self._set_value(self._ordinal(limit), state, value)

    def set_limit_by_index(self, index: int, state: State, value: Union[str, int]) -> None:
        """
        Sets the value of a limit by its index. String values are parsed
        and negative values are changed to 0. For the entity count info
        property a string value is stored as is and an integer value
        activates the entity count info.

        :param index: the index of the limit.
        :param state: the state of the setting.
        :param value: the value of the setting, an integer or a string.
        """
        if not isinstance(state, State):
            msg = _("invalid type {!r} for state, must be a {!r}")
            raise XMLLimitsTypeError(msg.format(type(state), State))
        elif index == ENTITY_COUNT_INFO_INDEX:
            if isinstance(value, str):
                self.entity_count_info = value
            else:
                # explicitly set, it's treated as yes no matter the value
                self.entity_count_info = YES
        else:
            self._check_index(index)
            name = self.limits[index].api_property
            self._set_value(index, state, parse_limit_value(value, name))

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) \
                or not 0 <= index < len(self.limits):
            raise XMLLimitsValueError(_("invalid limit index {!r}").format(index))

    def get_index(self, property_name: str) -> int:
        """
        Gets the index of a limit by property name. Both API and system
        property names are recognized.

        :param property_name: the property name.
        :return: the index of the property if found, -1 otherwise.
        """
        for k, limit in enumerate(self.limits):
            if property_name == limit.api_property or \
                    property_name == limit.system_property:
                return k

        if property_name == ENTITY_COUNT_INFO:
            return ENTITY_COUNT_INFO_INDEX
        return -1

    def get_limit(self, limit: LimitType) -> int:
        """Returns the value of a limit."""
        return self.values[self._ordinal(limit)]

    def get_limit_by_index(self, index: int) -> int:
        self._check_index(index)
        return self.values[index]

    def get_limit_value_as_string(self, limit: LimitType) -> str:
        return str(self.values[self._ordinal(limit)])

    def get_limit_value_by_index(self, index: int) -> str:
        if index == ENTITY_COUNT_INFO_INDEX:
            return self.entity_count_info
        self._check_index(index)
        return str(self.values[index])

    def get_limit_as_string(self, property_name: str) -> Optional[str]:
        """
        Returns the value of a property as a string, or `None` if the
        property is not managed by the registry.
        """
        index = self.get_index(property_name)
        if index < 0:
            return None
        return self.get_limit_value_by_index(index)

    def get_state(self, limit: LimitType) -> State:
        """Returns the state of the setting of a limit."""
        return self.states[self._ordinal(limit)]

    def get_state_literal(self, limit: LimitType) -> str:
        return self.states[self._ordinal(limit)].literal

    def is_set(self, limit: LimitType) -> bool:
        """Returns `True` if the limit has been explicitly set."""
        return self.is_set_flags[self._ordinal(limit)]

    def is_set_by_index(self, index: int) -> bool:
        self._check_index(index)
        return self.is_set_flags[index]

    def print_entity_count_info(self) -> bool:
        return self.entity_count_info == YES

    def items(self) -> Iterator[tuple[LimitType, int, State]]:
        """Iterates the managed limits with their values and states."""
        yield from zip(self.limits, self.values, self.states)

    def as_dict(self) -> dict[str, int]:
        """Returns a dictionary with the values of the limits mapped by key."""
        return {limit.key: value for limit, value in zip(self.limits, self.values)}
