#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
# mypy: ignore-errors
"""Command Line Interface"""
import sys
import os
import argparse
import logging

from xmllimits.exceptions import XMLLimitsException
from xmllimits.settings import LimitSettings


PROGRAM_NAME = os.path.basename(sys.argv[0])


def get_loglevel(verbosity):
    if verbosity <= 0:
        return logging.ERROR
    elif verbosity == 1:
        return logging.WARNING
    elif verbosity == 2:
        return logging.INFO
    else:
        return logging.DEBUG


def show():
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, add_help=True,
                                     description="show the effective protection limits.")
    parser.usage = "%(prog)s [OPTION]...\n" \
                   "Try '%(prog)s --help' for more information."

    parser.add_argument('-v', dest='verbosity', action='count', default=0,
                        help="increase output verbosity.")
    parser.add_argument('--secure', action='store_true', default=False,
                        help="initialize limits with secure processing values.")

    args = parser.parse_args()

    logging.basicConfig(format='%(levelname)s: %(message)s')
    settings = LimitSettings.get_settings(
        secure_processing=args.secure,
        loglevel=get_loglevel(args.verbosity),
    )

    try:
        registry = settings.get_registry()
    except XMLLimitsException as err:
        print(f"error: {err}", file=sys.stderr)
        sys.exit(1)

    width = max(len(limit.key) for limit in registry.limits)
    for limit, value, state in registry.items():
        print(f"{limit.key:<{width}}  {value:>10}  ({state.literal})")
    sys.exit(0)
