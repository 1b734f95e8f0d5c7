#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, Optional, TypeVar, Union

from xmllimits.exceptions import XMLLimitsValueError
from xmllimits.translation import gettext as _

logger = logging.getLogger('xmllimits')

LOG_LEVELS = frozenset(('DEBUG', 'INFO', 'WARN', 'WARNING', 'ERROR', 'CRITICAL'))


def get_logging_level(level: Union[str, int]) -> int:
    """Returns the numeric logging level for a level name or number."""
    if isinstance(level, str):
        _level = level.strip().upper()
        if _level not in LOG_LEVELS:
            raise XMLLimitsValueError(
                _("{!r} is not a valid loglevel").format(level)
            )
        return int(getattr(logging, _level))
    elif isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(_("invalid type {!r} for a loglevel").format(type(level)))
    return level


def set_logging_level(level: Union[str, int]) -> None:
    """Set the logging level of xmllimits's logger."""
    logger.setLevel(get_logging_level(level))


RT = TypeVar('RT')


def logged(func: Callable[..., RT]) -> Callable[..., RT]:
    """
    A decorator for activating a logging level for a function. The keyword
    argument 'loglevel' is obtained from the keyword arguments and used by the
    wrapper function to set the logging level of the decorated function and
    to restore the original level after the call.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> RT:
        loglevel: Optional[Union[int, str]] = kwargs.get('loglevel')
        if loglevel is None:
            return func(*args, **kwargs)

        current_level = logger.level
        set_logging_level(loglevel)
        try:
            return func(*args, **kwargs)
        finally:
            logger.setLevel(current_level)

    return wrapper
