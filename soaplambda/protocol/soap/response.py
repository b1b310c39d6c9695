
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

"""The ``soaplambda.protocol.soap.response`` module contains the default
response builder. It renders Soap 1.1 envelopes with lxml.

Return values are mapped to xml as follows:

    * ``None`` produces an empty ``Body``.
    * A dict produces one element per key, in insertion order. Nested dicts
      nest, lists and tuples repeat the element.
    * An lxml element is copied into the ``Body`` as is.
    * A list or tuple at the top level produces one ``result_tag`` element per
      item.
    * Anything else is wrapped in a single ``result_tag`` element.
"""

import logging
logger = logging.getLogger(__name__)

import datetime
import re

from base64 import b64encode
from collections.abc import Mapping
from copy import deepcopy

import pytz

from lxml import etree

import soaplambda.const.xml as ns

from soaplambda._base import Fault
from soaplambda.const import DEFAULT_ENCODING
from soaplambda.const import DEFAULT_ENVELOPE_PREFIX
from soaplambda.const import DEFAULT_RESULT_TAG
from soaplambda.const.http import HTTP_500
from soaplambda.protocol._base import ResponseBuilderBase


# everything outside the Char production of xml 1.0
_INVALID_XML_CHARS = re.compile(
           r"[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def strip_invalid_xml_chars(text):
    """Removes the characters that can't appear in an xml document."""

    return _INVALID_XML_CHARS.sub('', text)


def to_unicode(value):
    """Returns the text representation of a leaf value."""

    if isinstance(value, str):
        return value

    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, datetime.datetime):
        # Naive datetimes are assumed to be in utc.
        if value.tzinfo is None:
            value = pytz.utc.localize(value)
        return value.isoformat()

    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()

    if isinstance(value, (bytes, bytearray)):
        return b64encode(bytes(value)).decode('ascii')

    return str(value)


class SoapResponseBuilder(ResponseBuilderBase):
    """The default response builder.

    :param pretty_print: When ``True``, returns the document in a
        pretty-printed format. Default is ``False``.
    :param xml_declaration: Whether to add the xml declaration to the
        responses. Default is ``True``.
    :param encoding: The encoding declared in the xml declaration.
    :param result_tag: The element name that non-dict return values are
        wrapped in. Default is ``'return'``.
    :param namespace: When set, elements under ``Body`` are put in this
        namespace with the ``tns`` prefix.
    :param envelope_prefix: Namespace prefix of the envelope elements.
    """

    DEFAULT_OPTIONS = {
        'pretty_print': False,
        'xml_declaration': True,
        'encoding': DEFAULT_ENCODING,
        'result_tag': DEFAULT_RESULT_TAG,
        'namespace': None,
        'envelope_prefix': DEFAULT_ENVELOPE_PREFIX,
    }

    def tag(self, name):
        namespace = self.options['namespace']
        if namespace is None:
            return name

        return "{%s}%s" % (namespace, name)

    def create_envelope(self):
        nsmap = {self.options['envelope_prefix']: ns.NS_SOAP11_ENV}
        if self.options['namespace'] is not None:
            nsmap['tns'] = self.options['namespace']

        envelope = etree.Element(ns.SOAP11_ENV('Envelope'), nsmap=nsmap)
        body = etree.SubElement(envelope, ns.SOAP11_ENV('Body'))

        return envelope, body

    def to_parent(self, parent, name, value):
        if isinstance(value, (list, tuple)):
            for v in value:
                self.to_parent(parent, name, v)
            return

        elt = etree.SubElement(parent, self.tag(name))

        if value is None:
            pass

        elif etree.iselement(value):
            elt.append(deepcopy(value))

        elif isinstance(value, Mapping):
            for k, v in value.items():
                self.to_parent(elt, k, v)

        else:
            elt.text = to_unicode(value)

    def create_out_string(self, envelope):
        encoding = self.options['encoding']

        retval = etree.tostring(envelope,
                                pretty_print=self.options['pretty_print'],
                                xml_declaration=self.options['xml_declaration'],
                                encoding=encoding)

        return retval.decode(encoding)

    def success(self, value):
        envelope, body = self.create_envelope()

        if value is None:
            pass

        elif etree.iselement(value):
            body.append(deepcopy(value))

        elif isinstance(value, Mapping):
            for k, v in value.items():
                self.to_parent(body, k, v)

        else:
            self.to_parent(body, self.options['result_tag'], value)

        return self.create_out_string(envelope)

    def fault(self, error):
        fault = Fault.from_exception(error)

        envelope, body = self.create_envelope()
        fault_elt = etree.SubElement(body, ns.SOAP11_ENV('Fault'))

        # Just like http 4xx and 5xx codes, 'Client' indicates that something
        # was wrong with the input, 'Server' indicates that something went
        # wrong while processing an otherwise legitimate request.
        if fault.status_code < HTTP_500:
            code = 'Client'
        else:
            code = 'Server'

        etree.SubElement(fault_elt, 'faultcode').text = "%s:%s" % (
                                           self.options['envelope_prefix'], code)
        etree.SubElement(fault_elt, 'faultstring').text = \
                                          strip_invalid_xml_chars(fault.message)

        detail = etree.SubElement(fault_elt, 'detail')
        etree.SubElement(detail, 'statusCode').text = str(fault.status_code)

        return self.create_out_string(envelope)
