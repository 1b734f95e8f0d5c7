#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from . import translation
from .exceptions import XMLLimitsException, XMLLimitsAttributeError, \
    XMLLimitsTypeError, XMLLimitsValueError, XMLLimitsNumberError
from .limits import ENTITY_COUNT_INFO, ENTITY_COUNT_INFO_INDEX, YES, \
    LEGACY_NAMES, State, Limit, get_legacy_name
from .config import ConfigLoader, EnvironmentConfig
from .registry import LimitRegistry, parse_limit_value
from .diagnostics import PrintedWarnings, printed_warnings, print_warning
from .settings import LimitSettings
from .utils.logger import set_logging_level

__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2016-2026, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

__all__ = [
    'translation', 'XMLLimitsException', 'XMLLimitsAttributeError',
    'XMLLimitsTypeError', 'XMLLimitsValueError', 'XMLLimitsNumberError',
    'ENTITY_COUNT_INFO', 'ENTITY_COUNT_INFO_INDEX', 'YES', 'LEGACY_NAMES',
    'State', 'Limit', 'get_legacy_name', 'ConfigLoader', 'EnvironmentConfig',
    'LimitRegistry', 'parse_limit_value', 'PrintedWarnings', 'printed_warnings',
    'print_warning', 'LimitSettings', 'set_logging_level',
]
