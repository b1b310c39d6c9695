
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

"""The ``soaplambda.const`` package contains global constants used across the
package."""

CONTENT_TYPE_XML = 'application/xml'
"""The value of the ``Content-Type`` header of every response."""

WSDL_QUERY_KEY = 'wsdl'
"""The query string key that marks a request for the interface document."""

DEFAULT_RESULT_TAG = 'return'
"""The element name scalar return values are wrapped in."""

DEFAULT_ENVELOPE_PREFIX = 'soap'
"""The namespace prefix of the soap envelope elements in responses."""

DEFAULT_ENCODING = 'UTF-8'

FALLBACK_FAULT = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">'
    '<soap:Body><soap:Fault><faultcode>soap:Server</faultcode>'
    '<faultstring>Internal Error</faultstring></soap:Fault></soap:Body>'
    '</soap:Envelope>'
)
"""Returned verbatim when the response builder fails to render a fault."""
