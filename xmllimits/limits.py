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
Tables of the protection limits managed by the package and of the states
of their settings. A limit value of 0 means that the limit is not applied.
"""
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Optional, Protocol

__all__ = ['ENTITY_COUNT_INFO', 'ENTITY_COUNT_INFO_INDEX', 'YES', 'LEGACY_NAMES',
           'State', 'LimitType', 'Limit', 'get_legacy_name']

ENTITY_COUNT_INFO = 'entity_count_info'
"""The API property name that activates the report of entity counts."""

ENTITY_COUNT_INFO_INDEX = 10000
"""Index of the entity count info property, outside the range of the limits."""

YES = 'yes'


class State(IntEnum):
    """
    States of the setting of a limit. The order of the members is the order
    of precedence: a setting can be overridden only by a setting with the
    same state or with a following one.
    """
    DEFAULT = 0
    SECURE_PROCESSING = 1
    CONFIG_FILE = 2
    ENVIRONMENT = 3
    API_PROPERTY = 4

    @property
    def literal(self) -> str:
        return _STATE_LITERALS[self]


_STATE_LITERALS = MappingProxyType({
    State.DEFAULT: 'default',
    State.SECURE_PROCESSING: 'secure processing',
    State.CONFIG_FILE: 'configuration file',
    State.ENVIRONMENT: 'environment variable',
    State.API_PROPERTY: 'API property',
})


class LimitType(Protocol):
    """The protocol of the items of a limits table."""
    key: str
    api_property: str
    system_property: str
    default_value: int
    secure_value: int


class Limit(Enum):
    """
    Limits managed by a registry, each one with its key, the name of the API
    property, the name of the system property (environment variable or
    settings key), the default value and the value used in secure processing.
    """
    ENTITY_EXPANSION_LIMIT = (
        'EntityExpansionLimit', 'entity_expansion_limit',
        'XMLLIMITS_ENTITY_EXPANSION_LIMIT', 0, 64000
    )
    MAX_OCCUR_NODE_LIMIT = (
        'MaxOccurLimit', 'max_occur_limit',
        'XMLLIMITS_MAX_OCCUR_LIMIT', 0, 5000
    )
    ELEMENT_ATTRIBUTE_LIMIT = (
        'ElementAttributeLimit', 'element_attribute_limit',
        'XMLLIMITS_ELEMENT_ATTRIBUTE_LIMIT', 0, 10000
    )
    TOTAL_ENTITY_SIZE_LIMIT = (
        'TotalEntitySizeLimit', 'total_entity_size_limit',
        'XMLLIMITS_TOTAL_ENTITY_SIZE_LIMIT', 0, 50000000
    )
    GENERAL_ENTITY_SIZE_LIMIT = (
        'MaxGeneralEntitySizeLimit', 'max_general_entity_size_limit',
        'XMLLIMITS_MAX_GENERAL_ENTITY_SIZE_LIMIT', 0, 0
    )
    PARAMETER_ENTITY_SIZE_LIMIT = (
        'MaxParameterEntitySizeLimit', 'max_parameter_entity_size_limit',
        'XMLLIMITS_MAX_PARAMETER_ENTITY_SIZE_LIMIT', 0, 1000000
    )
    MAX_ELEMENT_DEPTH_LIMIT = (
        'MaxElementDepthLimit', 'max_element_depth',
        'XMLLIMITS_MAX_ELEMENT_DEPTH', 0, 0
    )
    MAX_NAME_LIMIT = (
        'MaxXMLNameLimit', 'max_xml_name_limit',
        'XMLLIMITS_MAX_XML_NAME_LIMIT', 1000, 1000
    )
    ENTITY_REPLACEMENT_LIMIT = (
        'EntityReplacementLimit', 'entity_replacement_limit',
        'XMLLIMITS_ENTITY_REPLACEMENT_LIMIT', 0, 3000000
    )

    def __init__(self, key: str, api_property: str, system_property: str,
                 default_value: int, secure_value: int) -> None:
        self.key = key
        self.api_property = api_property
        self.system_property = system_property
        self.default_value = default_value
        self.secure_value = secure_value


# Old names of system properties, still looked up when the new name is not set.
LEGACY_NAMES: Mapping[str, str] = MappingProxyType({
    Limit.ENTITY_EXPANSION_LIMIT.system_property: 'ENTITY_EXPANSION_LIMIT',
    Limit.MAX_OCCUR_NODE_LIMIT.system_property: 'MAX_OCCUR_LIMIT',
    Limit.ELEMENT_ATTRIBUTE_LIMIT.system_property: 'ELEMENT_ATTRIBUTE_LIMIT',
})


def get_legacy_name(system_property: str,
                    legacy_names: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Returns the old name of a system property, or `None` if the
    property has never been renamed.
    """
    if legacy_names is None:
        legacy_names = LEGACY_NAMES
    return legacy_names.get(system_property)
