
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

"""The ``soaplambda.protocol.soap.request`` module contains the default request
parser. It reads Soap 1.1 and Soap 1.2 envelopes and extracts the operation
name and its ordered inputs from the first child of the ``Body`` element.

Logs invalid documents to %r.
""" % (__name__ + ".invalid")

import logging
logger = logging.getLogger(__name__)
logger_invalid = logging.getLogger(__name__ + ".invalid")

from copy import deepcopy

from lxml import etree
from lxml.etree import XMLSyntaxError
from lxml.etree import XMLParser

import soaplambda.const.xml as ns

from soaplambda._base import OperationDescriptor
from soaplambda._base import OperationInput
from soaplambda.error import RequestParseError
from soaplambda.protocol._base import RequestParserBase


_NIL_VALUES = ('true', '1')


def _is_element(elt):
    # comments and processing instructions have non-string tags
    return isinstance(elt.tag, str)


def _local_name(elt):
    return etree.QName(elt).localname


def parse_xml_string(xml_string, parser):
    """Parses ``xml_string`` and returns the root element along with a dict of
    the elements that have an ``id`` attribute."""

    try:
        try:
            root, xmlids = etree.XMLID(xml_string, parser)

        except ValueError:
            logger.debug('ValueError: Deserializing from unicode strings with '
                         'encoding declaration is not supported by lxml.')
            root, xmlids = etree.XMLID(xml_string.encode('utf8'), parser)

    except XMLSyntaxError as e:
        logger_invalid.error("%r in string %r", e, xml_string)
        raise RequestParseError(str(e))

    return root, xmlids


# see http://www.w3.org/TR/2000/NOTE-SOAP-20000508/
# section 5.2.1 for an example of how the id and href attributes are used.
def resolve_hrefs(element, xmlids, max_elements=None, _seen=None,
                                                                  _budget=None):
    """Replaces ``href`` references under ``element`` with the contents of the
    elements they point to.

    :param max_elements: The number of elements that can be copied in while
        resolving. A :class:`RequestParseError` is raised when it's exceeded.
        ``None`` means no limit.
    """

    if _seen is None:
        _seen = set()
    if _budget is None:
        _budget = [max_elements]

    for e in element:
        if not _is_element(e):
            continue

        if e.get('id'):
            continue # don't need to resolve this element

        elif e.get('href'):
            ref = e.get('href').replace('#', '')
            resolved_element = xmlids.get(ref, None)
            if resolved_element is None or ref in _seen:
                continue

            resolve_hrefs(resolved_element, xmlids, max_elements,
                                                      _seen | {ref}, _budget)

            if _budget[0] is not None:
                # the element itself is not copied, only its descendants.
                _budget[0] -= sum(1 for _ in resolved_element.iter()) - 1
                if _budget[0] < 0:
                    logger_invalid.error("More than %d elements referenced "
                                         "via href", max_elements)
                    raise RequestParseError("Too many elements referenced "
                                                                   "via href")

            # copies the attributes
            for k, v in resolved_element.items():
                if k != 'id':
                    e.set(k, v)
            del e.attrib['href']

            # copies the children
            for child in resolved_element:
                e.append(deepcopy(child))

            # copies the text
            e.text = resolved_element.text

        else:
            resolve_hrefs(e, xmlids, max_elements, _seen, _budget)

    return element


def get_soap_body(envelope):
    """Returns the ``Body`` element of ``envelope``."""

    if envelope.tag not in [ns.SOAP11_ENV('Envelope'), ns.SOAP12_ENV('Envelope')]:
        raise RequestParseError("No {%s}Envelope element was found!"
                                                             % ns.NS_SOAP11_ENV)

    soap_ns = etree.QName(envelope).namespace
    body = envelope.find('{%s}Body' % soap_ns)
    if body is None:
        raise RequestParseError("Soap envelope is empty!")

    return body


class SoapRequestParser(RequestParserBase):
    """The default request parser.

    :param huge_tree: Passed to lxml's parser. Lifts the default limits on
        the size and depth of the document.
    :param remove_comments: Passed to lxml's parser.
    :param strip_whitespace: When ``True``, leading and trailing whitespace is
        stripped from leaf values. Default is ``True``.
    :param max_resolved_elements: The number of elements that ``href``
        references can copy into the request. Requests going over it are
        rejected with a 400. ``None`` lifts the limit. Default is 10000.
    """

    DEFAULT_OPTIONS = {
        'huge_tree': False,
        'remove_comments': True,
        'strip_whitespace': True,
        'max_resolved_elements': 10000,
    }

    @property
    def parser_kwargs(self):
        return dict(
            huge_tree=self.options['huge_tree'],
            remove_comments=self.options['remove_comments'],
            resolve_entities=False,
            no_network=True,
        )

    def get_operation(self, body):
        if body is None or len(body) == 0:
            raise RequestParseError("Request body is empty")

        envelope, xmlids = parse_xml_string(body,
                                              XMLParser(**self.parser_kwargs))

        soap_body = get_soap_body(envelope)
        if len(xmlids) > 0:
            resolve_hrefs(soap_body, xmlids,
                                   self.options['max_resolved_elements'])

        children = [c for c in soap_body if _is_element(c)]
        if len(children) == 0:
            raise RequestParseError("Soap body is empty!")

        op_elt = children[0]
        inputs = [OperationInput(_local_name(c), self.element_to_value(c))
                                               for c in op_elt if _is_element(c)]

        return OperationDescriptor(_local_name(op_elt), inputs)

    def element_to_value(self, elt):
        """Leaves become strings, elements with children become dicts keyed by
        the local names of the children. Repeated children become lists."""

        if elt.get(ns.XSI('nil')) in _NIL_VALUES:
            return None

        children = [c for c in elt if _is_element(c)]
        if len(children) == 0:
            text = elt.text or ''
            if self.options['strip_whitespace']:
                text = text.strip()
            return text

        retval = {}
        repeated = set()
        for c in children:
            k = _local_name(c)
            v = self.element_to_value(c)

            if k in repeated:
                retval[k].append(v)
            elif k in retval:
                retval[k] = [retval[k], v]
                repeated.add(k)
            else:
                retval[k] = v

        return retval
