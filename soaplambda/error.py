
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


"""The ``soaplambda.error`` module contains the exceptions that the dispatcher
raises internally and that user code can throw from service operations.

Every request-level failure is a :class:`SoapError`, which carries the http
status code the fault is returned with. Startup failures derive from
:class:`SoapLambdaError` instead and are never rendered as faults.
"""

from soaplambda.const.http import HTTP_400
from soaplambda.const.http import HTTP_403
from soaplambda.const.http import HTTP_404
from soaplambda.const.http import HTTP_405
from soaplambda.const.http import HTTP_500
from soaplambda.const.http import HTTP_501


class SoapLambdaError(Exception):
    """Base class for errors that are raised while the server is being
    constructed."""


class ConfigurationError(SoapLambdaError):
    """Raised when the server configuration is not usable."""


class WsdlError(SoapLambdaError):
    """Raised when a wsdl document can't be read or is not well-formed xml."""

    def __init__(self, message, path=None):
        super(WsdlError, self).__init__(message)

        self.path = path


class SoapError(Exception):
    """Use this class as a base for all public exceptions. It carries a status
    code and a human-readable message.

    :param status_code: The http status code the fault is returned with.
    :param message: The ``faultstring`` of the resulting soap fault.
    """

    STATUS = HTTP_500
    MESSAGE = "Internal Error"

    def __init__(self, status_code=None, message=None):
        if status_code is None:
            status_code = self.STATUS
        if message is None:
            message = self.MESSAGE

        super(SoapError, self).__init__(message)

        self.status_code = status_code
        self.message = message

    @property
    def status(self):
        return self.status_code

    def __repr__(self):
        return "%s(%d: %r)" % (self.__class__.__name__, self.status_code,
                                                                   self.message)


class RequestParseError(SoapError):
    """Raised when the request body is not a soap envelope we can read."""

    STATUS = HTTP_400
    MESSAGE = "Cannot parse the request"

    def __init__(self, message=MESSAGE):
        super(RequestParseError, self).__init__(self.STATUS, message)


class AccessForbiddenError(SoapError):
    """Raised when the authorization predicate rejects the event."""

    STATUS = HTTP_403
    MESSAGE = "Access Forbidden"

    def __init__(self, message=MESSAGE):
        super(AccessForbiddenError, self).__init__(self.STATUS, message)


class ServiceNotFoundError(SoapError):
    """Raised when no service is registered under the requested name."""

    STATUS = HTTP_404
    MESSAGE = "Service not found"

    def __init__(self, message=MESSAGE):
        super(ServiceNotFoundError, self).__init__(self.STATUS, message)


class MethodNotAllowedError(SoapError):
    """Raised for anything other than a wsdl GET or an operation POST."""

    STATUS = HTTP_405
    MESSAGE = "Method Not Allowed"

    def __init__(self, message=MESSAGE):
        super(MethodNotAllowedError, self).__init__(self.STATUS, message)


class InternalError(SoapError):
    """Raised to communicate server-side errors."""

    STATUS = HTTP_500
    MESSAGE = "Internal Error"

    def __init__(self, message=MESSAGE):
        super(InternalError, self).__init__(self.STATUS, message)


class OperationNotImplementedError(SoapError):
    """Raised when the service has no operation with the requested name."""

    STATUS = HTTP_501
    # clients match on this exact string, typo included.
    MESSAGE = "Operation didn't implemented"

    def __init__(self, message=MESSAGE):
        super(OperationNotImplementedError, self).__init__(self.STATUS,
                                                                        message)
