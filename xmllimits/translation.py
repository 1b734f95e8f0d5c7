#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
Translation of the error and diagnostic messages of the package.

No message catalogs are shipped with the package: the default *locale*
subdirectory is looked up only if added by a distribution, otherwise a
catalog directory has to be provided with the *localedir* argument.
"""
import gettext as _gettext
from pathlib import Path
from typing import cast, Any, Iterable, Optional, Union

__all__ = ['activate', 'deactivate', 'is_active', 'gettext']

LOCALE_DIR = Path(__file__).parent.joinpath('locale')
TRANSLATION_DOMAIN = 'xmllimits'

_translation: Any = None
_installed: bool = False


def activate(localedir: Union[None, str, Path] = None,
             languages: Optional[Iterable[str]] = None,
             fallback: bool = True,
             install: bool = False) -> None:
    """
    Activate the translation of xmllimits messages. A previously
    activated translation is replaced.

    :param localedir: a string or Path-like object to locale directory, \
    for default is the *locale* subdirectory of the package.
    :param languages: list of language codes.
    :param fallback: if `True`, the default, a missing catalog activates \
    a null translation instead of raising an `OSError`.
    :param install: if `True` installs function _() in Python’s builtins namespace.
    """
    global _translation
    global _installed

    translation = _gettext.translation(
        domain=TRANSLATION_DOMAIN,
        localedir=LOCALE_DIR if localedir is None else localedir,
        languages=languages,
        fallback=fallback,
    )

    deactivate()
    _translation = translation
    if install:
        translation.install()
        _installed = True


def deactivate() -> None:
    """Deactivate the translation of xmllimits messages."""
    global _translation
    global _installed

    if _installed and _translation is not None:
        import builtins
        if builtins.__dict__.get('_') == _translation.gettext:
            del builtins.__dict__['_']

    _translation = None
    _installed = False


def is_active() -> bool:
    return _translation is not None


def gettext(message: str) -> str:
    if _translation is None:
        return message
    return cast(str, _translation.gettext(message))
