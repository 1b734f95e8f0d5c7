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
Sources of system settings used for initializing the limits of a registry.
"""
import os
from abc import ABCMeta, abstractmethod
from collections.abc import Mapping
from typing import Optional

from xmllimits.exceptions import XMLLimitsTypeError
from xmllimits.limits import State
from xmllimits.translation import gettext as _

__all__ = ['ConfigLoader', 'EnvironmentConfig']


class ConfigLoader(metaclass=ABCMeta):
    """
    Base class for the collaborators that provide the system settings of
    the limits. A loader returns the string value of a setting together with
    the state that the setting has to take in the registry.
    """
    @abstractmethod
    def get_property(self, name: str) -> Optional[tuple[str, State]]:
        """
        Returns a couple with the string value and the state of a setting,
        or `None` if the setting is not configured.

        :param name: the name of the system property.
        """


class EnvironmentConfig(ConfigLoader):
    """
    A loader that looks up settings first in environment variables and then
    in the settings loaded from a configuration file. The reading of the file
    is up to the caller, that provides the settings as a mapping.

    :param environ: the environment variables, for default `os.environ`.
    :param settings: optional mapping of the settings of a configuration file.
    """
    def __init__(self, environ: Optional[Mapping[str, str]] = None,
                 settings: Optional[Mapping[str, str]] = None) -> None:
        if environ is None:
            environ = os.environ
        elif not isinstance(environ, Mapping):
            msg = _("invalid type {!r} for environ, must be a mapping")
            raise XMLLimitsTypeError(msg.format(type(environ)))

        if settings is None:
            settings = {}
        elif not isinstance(settings, Mapping):
            msg = _("invalid type {!r} for settings, must be a mapping")
            raise XMLLimitsTypeError(msg.format(type(settings)))

        self.environ = environ
        self.settings = settings

    def __repr__(self) -> str:
        return '%s(settings=%r)' % (self.__class__.__name__, dict(self.settings))

    def get_property(self, name: str) -> Optional[tuple[str, State]]:
        value = self.environ.get(name)
        if value:
            return value, State.ENVIRONMENT

        value = self.settings.get(name)
        if value:
            return value, State.CONFIG_FILE
        return None
