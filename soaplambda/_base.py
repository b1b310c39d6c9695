
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

from collections import namedtuple

from soaplambda.const import CONTENT_TYPE_XML
from soaplambda.const.http import HTTP_500
from soaplambda.const.http import is_error_status


OperationInput = namedtuple("OperationInput", ["name", "value"])


class OperationDescriptor(namedtuple("OperationDescriptor",
                                                       ["operation", "inputs"])):
    """The operation name and the ordered input values extracted from one
    request."""

    __slots__ = ()

    def __new__(cls, operation, inputs=()):
        return super(OperationDescriptor, cls).__new__(cls, operation,
                                                                  tuple(inputs))

    @property
    def values(self):
        """Input values in the order they were supplied."""

        return [i.value for i in self.inputs]


class Success(namedtuple("Success", ["value"])):
    """The successful outcome of a dispatch stage."""

    __slots__ = ()

    is_fault = False


class Fault(namedtuple("Fault", ["status_code", "message"])):
    """The failed outcome of a dispatch stage. Immutable once constructed.

    :param status_code: The http status code of the response.
    :param message: Human-readable explanation, ends up in ``faultstring``.
    """

    __slots__ = ()

    is_fault = True

    @property
    def status(self):
        return self.status_code

    @classmethod
    def from_exception(cls, e, default_status=HTTP_500):
        """Converts any exception to a fault. The status is taken from the
        ``status_code`` or ``status`` attribute of the exception when it's a
        valid error status, ``default_status`` otherwise."""

        if isinstance(e, Fault):
            return e

        status = getattr(e, 'status_code', None)
        if not is_error_status(status):
            status = getattr(e, 'status', None)
        if not is_error_status(status):
            status = default_status

        message = getattr(e, 'message', None)
        if not isinstance(message, str) or len(message) == 0:
            message = str(e)
        if len(message) == 0:
            message = e.__class__.__name__

        return cls(status, message)


class HttpResponse(namedtuple("HttpResponse",
                                          ["body", "status_code", "headers"])):
    """What the dispatcher returns for every event."""

    __slots__ = ()

    def __new__(cls, body, status_code, headers=None):
        if headers is None:
            headers = {"Content-Type": CONTENT_TYPE_XML}

        return super(HttpResponse, cls).__new__(cls, body, status_code,
                                                                        headers)

    def to_dict(self):
        """Returns the response in the shape api gateway proxy integrations
        expect."""

        return {
            "body": self.body,
            "statusCode": self.status_code,
            "headers": dict(self.headers),
        }
