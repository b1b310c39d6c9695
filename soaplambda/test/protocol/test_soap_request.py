
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

import unittest

from soaplambda.error import ConfigurationError
from soaplambda.error import RequestParseError
from soaplambda.protocol.soap import SoapRequestParser


NS_SOAP11 = 'http://schemas.xmlsoap.org/soap/envelope/'
NS_SOAP12 = 'http://www.w3.org/2003/05/soap-envelope'


def _envelope(body, ns=NS_SOAP11, header=''):
    return (
        '<senv:Envelope xmlns:senv="%s" xmlns:tns="tns" '
        'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">'
        '%s<senv:Body>%s</senv:Body></senv:Envelope>'
    ) % (ns, header, body)


def _fan_out(levels, width):
    """Every multiRef element references the next one ``width`` times."""

    retval = ['<tns:Echo><p href="#r0"/></tns:Echo>']
    for i in range(levels):
        retval.append('<multiRef id="r%d">%s</multiRef>'
                                % (i, '<x href="#r%d"/>' % (i + 1) * width))
    retval.append('<multiRef id="r%d">v</multiRef>' % levels)

    return ''.join(retval)


class TestSoapRequestParser(unittest.TestCase):
    def setUp(self):
        self.parser = SoapRequestParser()

    def test_operation_and_inputs(self):
        req = _envelope('<tns:Add><tns:a>1</tns:a><tns:b>2</tns:b></tns:Add>',
                                header='<senv:Header><tns:token>x</tns:token>'
                                       '</senv:Header>')
        d = self.parser.get_operation(req)

        assert d.operation == 'Add'
        assert [i.name for i in d.inputs] == ['a', 'b']
        assert d.values == ['1', '2']

    def test_order_is_kept(self):
        req = _envelope('<Op><z>1</z><a>2</a><m>3</m></Op>')
        d = self.parser.get_operation(req)

        assert d.operation == 'Op'
        assert [i.name for i in d.inputs] == ['z', 'a', 'm']
        assert d.values == ['1', '2', '3']

    def test_soap12(self):
        d = self.parser.get_operation(_envelope('<tns:Ping/>', ns=NS_SOAP12))

        assert d.operation == 'Ping'
        assert d.inputs == ()

    def test_bytes(self):
        req = ('<?xml version="1.0" encoding="UTF-8"?>' +
                     _envelope('<tns:Echo><s>çö</s></tns:Echo>'))
        d = self.parser.get_operation(req.encode('utf8'))

        assert d.values == ['çö']

    def test_unicode_with_declaration(self):
        req = ('<?xml version="1.0" encoding="UTF-8"?>' +
                                       _envelope('<tns:Echo><s>x</s></tns:Echo>'))
        assert self.parser.get_operation(req).values == ['x']

    def test_whitespace(self):
        req = _envelope('<tns:Echo>\n  <s>  padded  </s>\n</tns:Echo>')

        assert self.parser.get_operation(req).values == ['padded']
        assert SoapRequestParser(strip_whitespace=False) \
                                   .get_operation(req).values == ['  padded  ']

    def test_empty_and_nil(self):
        req = _envelope('<tns:Echo><a/><b></b><c xsi:nil="true"/></tns:Echo>')

        assert self.parser.get_operation(req).values == ['', '', None]

    def test_nested(self):
        req = _envelope(
            '<tns:AddPerson>'
              '<person>'
                '<name>Jane</name>'
                '<address><city>Ankara</city></address>'
                '<phone>1</phone><phone>2</phone><phone>3</phone>'
              '</person>'
              '<notify>true</notify>'
            '</tns:AddPerson>'
        )
        d = self.parser.get_operation(req)

        assert d.values == [
            {
                'name': 'Jane',
                'address': {'city': 'Ankara'},
                'phone': ['1', '2', '3'],
            },
            'true',
        ]

    def test_comments_are_ignored(self):
        req = _envelope('<!-- first --><tns:Echo><!-- c --><s>x</s></tns:Echo>')
        d = SoapRequestParser(remove_comments=False).get_operation(req)

        assert d.operation == 'Echo'
        assert d.values == ['x']

    def test_hrefs(self):
        req = _envelope(
            '<tns:Echo><s href="#id0"/></tns:Echo>'
            '<tns:String id="id0">referenced</tns:String>'
        )
        d = self.parser.get_operation(req)

        assert d.operation == 'Echo'
        assert d.values == ['referenced']

    def test_nested_hrefs(self):
        req = _envelope(
            '<tns:Echo><p href="#id0"/></tns:Echo>'
            '<tns:Person id="id0"><name>Jane</name><a href="#id1"/></tns:Person>'
            '<tns:Address id="id1"><city>Izmir</city></tns:Address>'
        )
        d = self.parser.get_operation(req)

        assert d.values == [{'name': 'Jane', 'a': {'city': 'Izmir'}}]

    def test_fan_out_hrefs_are_limited(self):
        req = _envelope(_fan_out(levels=6, width=10))

        with self.assertRaises(RequestParseError) as cm:
            self.parser.get_operation(req)

        assert cm.exception.status_code == 400

    def test_fan_out_hrefs_within_limit(self):
        req = _envelope(_fan_out(levels=2, width=3))

        d = self.parser.get_operation(req)
        p = d.values[0]
        assert len(p['x']) == 3
        assert p['x'][0] == {'x': ['v', 'v', 'v']}

        with self.assertRaises(RequestParseError):
            SoapRequestParser(max_resolved_elements=5).get_operation(req)

        d = SoapRequestParser(max_resolved_elements=None).get_operation(req)
        assert d.values == [p]

    def test_invalid_xml(self):
        for req in ('<senv:Envelope', 'plain text', '<a><b></a>'):
            with self.assertRaises(RequestParseError) as cm:
                self.parser.get_operation(req)

            assert cm.exception.status_code == 400

    def test_empty(self):
        for req in (None, '', b''):
            with self.assertRaises(RequestParseError):
                self.parser.get_operation(req)

    def test_not_an_envelope(self):
        with self.assertRaises(RequestParseError):
            self.parser.get_operation('<tns:Add xmlns:tns="tns"/>')

        with self.assertRaises(RequestParseError):
            self.parser.get_operation(
                          '<Envelope xmlns="urn:not-soap"><Body><a/></Body>'
                          '</Envelope>')

    def test_no_body(self):
        with self.assertRaises(RequestParseError):
            self.parser.get_operation(
                                 '<senv:Envelope xmlns:senv="%s"/>' % NS_SOAP11)

    def test_empty_body(self):
        with self.assertRaises(RequestParseError):
            self.parser.get_operation(_envelope(''))

    def test_entities_are_not_resolved(self):
        req = ('<!DOCTYPE foo [<!ENTITY xxe SYSTEM "file:///etc/passwd">]>' +
                              _envelope('<tns:Echo><s>&xxe;</s></tns:Echo>'))
        try:
            d = self.parser.get_operation(req)
        except RequestParseError:
            pass
        else:
            assert 'root:' not in str(d.values)

    def test_unknown_option(self):
        with self.assertRaises(ConfigurationError):
            SoapRequestParser(validate=True)


if __name__ == '__main__':
    unittest.main()
