
#
# soaplambda - Copyright (C) soaplambda contributors.
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301
#

"""Logging utilites."""

import logging
logger = logging.getLogger(__name__)

from soaplambda.const.http import HTTP_500


PACKAGE_LOGGER_NAME = 'soaplambda'


def set_debug(debug):
    """Turns verbose output of the whole package on or off. Turning it off
    lets the package logger inherit its level again."""

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if debug:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.NOTSET)


def log_fault(fault, exc=None, log=logger):
    """Logs server faults as errors and client faults as warnings. When the
    fault came from an exception, its traceback is logged too."""

    level = logging.ERROR if fault.status_code >= HTTP_500 else logging.WARNING

    log.log(level, "Returning fault %d: %s", fault.status_code, fault.message,
                                                                 exc_info=exc)
