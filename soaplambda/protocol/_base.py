
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

import logging
logger = logging.getLogger(__name__)

from soaplambda.error import ConfigurationError


class RequestParserBase(object):
    """Base class for the objects that turn a raw request body into a
    :class:`soaplambda.OperationDescriptor`.

    Implementations should raise a :class:`soaplambda.error.SoapError` (or any
    exception with an integer ``status_code`` attribute) to control the status
    of the resulting fault. Other exceptions end up as 500s.

    :param options: Implementation specific keyword arguments. Unknown keys
        make the constructor fail.
    """

    DEFAULT_OPTIONS = {}

    def __init__(self, **options):
        unknown = set(options) - set(self.DEFAULT_OPTIONS)
        if len(unknown) > 0:
            raise ConfigurationError("Unknown %s option(s): %s" % (
                          self.__class__.__name__, ', '.join(sorted(unknown))))

        self.options = dict(self.DEFAULT_OPTIONS)
        self.options.update(options)

    def get_operation(self, body):
        """Returns an :class:`OperationDescriptor` for ``body``."""

        raise NotImplementedError()


class ResponseBuilderBase(object):
    """Base class for the objects that render operation return values and
    faults into response bodies.

    :param options: Implementation specific keyword arguments. Unknown keys
        make the constructor fail.
    """

    DEFAULT_OPTIONS = {}

    def __init__(self, **options):
        unknown = set(options) - set(self.DEFAULT_OPTIONS)
        if len(unknown) > 0:
            raise ConfigurationError("Unknown %s option(s): %s" % (
                          self.__class__.__name__, ', '.join(sorted(unknown))))

        self.options = dict(self.DEFAULT_OPTIONS)
        self.options.update(options)

    def success(self, value):
        """Returns the response body for the return value of an operation."""

        raise NotImplementedError()

    def fault(self, error):
        """Returns the response body for ``error``, which is either a
        :class:`soaplambda.Fault` or an exception."""

        raise NotImplementedError()
