
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

"""Helpers that read the fields the dispatcher needs out of api gateway
proxy events. Both the REST api (payload version 1.0) and the HTTP api
(payload version 2.0) shapes are understood.

Events are normally dicts, but objects returned by a custom event parser can
expose the same fields as attributes.
"""

import logging
logger = logging.getLogger(__name__)

from base64 import b64decode
from binascii import Error as BinasciiError
from collections.abc import Mapping

from soaplambda.const import WSDL_QUERY_KEY
from soaplambda.error import RequestParseError


def get_field(event, key, default=None):
    if isinstance(event, Mapping):
        return event.get(key, default)

    return getattr(event, key, default)


def get_path(event):
    path = get_field(event, 'path', None)
    if path is None:
        path = get_field(event, 'rawPath', None)

    return path


def get_http_method(event):
    """Returns the upper-cased http verb or an empty string."""

    method = get_field(event, 'httpMethod', None)
    if method is None:
        http = get_field(get_field(event, 'requestContext', None) or {},
                                                                  'http', None)
        if http is not None:
            method = get_field(http, 'method', None)

    if method is None:
        return ''

    return str(method).upper()


def get_query_parameters(event):
    """Returns a copy of the query string parameters. Missing or null
    parameters produce an empty dict."""

    params = get_field(event, 'queryStringParameters', None)
    if params is None:
        return {}

    return dict(params)


def get_service_name(path):
    """Returns the last segment of ``path`` after stripping one trailing
    slash, or None when there isn't one. ::

        >>> get_service_name('/prod/soap/Calculator/')
        'Calculator'
    """

    if not path:
        return None

    if path.endswith('/'):
        path = path[:-1]

    retval = path.split('/')[-1]
    if len(retval) == 0:
        return None

    return retval


def is_wsdl_request(method, params):
    """True for a GET with a ``wsdl`` query key, with or without a value."""

    if method != 'GET':
        return False

    return any(k.lower() == WSDL_QUERY_KEY for k in params)


def get_body(event):
    """Returns the request body, base64-decoded when the event says so."""

    body = get_field(event, 'body', None)
    if body is None:
        return None

    if get_field(event, 'isBase64Encoded', False):
        try:
            return b64decode(body, validate=True)

        except (BinasciiError, ValueError, TypeError) as e:
            logger.error("%r while decoding the request body", e)
            raise RequestParseError("Request body is not valid base64")

    return body
