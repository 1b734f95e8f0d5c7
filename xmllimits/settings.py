#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Package settings for building limit registries."""
import dataclasses as dc
from typing import Any, Optional

from xmllimits.exceptions import XMLLimitsTypeError
from xmllimits.translation import gettext as _
from xmllimits.utils.descriptors import BooleanOption, LogLevelOption
from xmllimits.config import ConfigLoader
from xmllimits.registry import LimitRegistry


@dc.dataclass
class LimitSettings:
    """Settings for creating the limit registries of processing sessions."""

    secure_processing: BooleanOption = BooleanOption(default=False)
    """
    If `True` limits are initialized with their secure values. Limits set
    by system settings are not affected.
    """

    loglevel: LogLevelOption = LogLevelOption(default=None)
    """The logging level to apply while building a registry."""

    @classmethod
    def get_settings(cls, **kwargs: Any) -> 'LimitSettings':
        settings = kwargs.pop('settings', _DEFAULT_LIMIT_SETTINGS)
        if not isinstance(settings, LimitSettings):
            msg = _("expected a LimitSettings instance for 'settings', got {!r}'")
            raise XMLLimitsTypeError(msg.format(settings))
        return dc.replace(settings, **kwargs)

    @classmethod
    def update_defaults(cls, **kwargs: Any) -> None:
        global _DEFAULT_LIMIT_SETTINGS
        _DEFAULT_LIMIT_SETTINGS = LimitSettings.get_settings(**kwargs)

    @classmethod
    def reset_defaults(cls) -> None:
        global _DEFAULT_LIMIT_SETTINGS
        _DEFAULT_LIMIT_SETTINGS = LimitSettings()

    def get_registry(self, config: Optional[ConfigLoader] = None,
                     **kwargs: Any) -> LimitRegistry:
        """
        Returns a new :class:`LimitRegistry` instance built with the settings.

        :param config: optional loader of system settings, for default \
        the environment variables are used.
        :param kwargs: other optional arguments for the registry, like an \
        alternative limits table.
        """
        return LimitRegistry(
            secure_processing=self.secure_processing,
            config=config,
            loglevel=self.loglevel,
            **kwargs
        )


# Default package settings
_DEFAULT_LIMIT_SETTINGS = LimitSettings()


def get_default_settings() -> LimitSettings:
    return _DEFAULT_LIMIT_SETTINGS
