
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

import asyncio
import unittest

from base64 import b64encode

from soaplambda.error import RequestParseError
from soaplambda.util import resolve
from soaplambda.util.event import get_body
from soaplambda.util.event import get_http_method
from soaplambda.util.event import get_path
from soaplambda.util.event import get_query_parameters
from soaplambda.util.event import get_service_name
from soaplambda.util.event import is_wsdl_request


class Event(object):
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


class TestEvent(unittest.TestCase):
    def test_service_name(self):
        assert get_service_name('/Calculator') == 'Calculator'
        assert get_service_name('/prod/soap/Calculator') == 'Calculator'
        assert get_service_name('/prod/soap/Calculator/') == 'Calculator'
        assert get_service_name('Calculator') == 'Calculator'

    def test_no_service_name(self):
        assert get_service_name(None) is None
        assert get_service_name('') is None
        assert get_service_name('/') is None
        assert get_service_name('/Calculator//') is None

    def test_path(self):
        assert get_path({'path': '/a'}) == '/a'
        assert get_path({'rawPath': '/b'}) == '/b'
        assert get_path({'path': '/a', 'rawPath': '/b'}) == '/a'
        assert get_path({}) is None
        assert get_path(Event(path='/c')) == '/c'

    def test_http_method(self):
        assert get_http_method({'httpMethod': 'post'}) == 'POST'
        assert get_http_method({'requestContext': {'http': {'method': 'get'}}}) \
                                                                        == 'GET'
        assert get_http_method({}) == ''
        assert get_http_method({'requestContext': None}) == ''
        assert get_http_method(Event(httpMethod='GET')) == 'GET'

    def test_query_parameters(self):
        assert get_query_parameters({}) == {}
        assert get_query_parameters({'queryStringParameters': None}) == {}

        params = {'wsdl': ''}
        copy = get_query_parameters({'queryStringParameters': params})
        assert copy == params
        assert copy is not params

    def test_is_wsdl_request(self):
        assert is_wsdl_request('GET', {'wsdl': ''})
        assert is_wsdl_request('GET', {'wsdl': '1'})
        assert is_wsdl_request('GET', {'WSDL': None})
        assert is_wsdl_request('GET', {'a': 'b', 'Wsdl': 'true'})

        assert not is_wsdl_request('GET', {})
        assert not is_wsdl_request('GET', {'wsdl2': '1'})
        assert not is_wsdl_request('POST', {'wsdl': '1'})

    def test_body(self):
        assert get_body({'body': '<a/>'}) == '<a/>'
        assert get_body({}) is None
        assert get_body({'body': b64encode(b'<a/>').decode('ascii'),
                                            'isBase64Encoded': True}) == b'<a/>'
        assert get_body({'body': '<a/>', 'isBase64Encoded': False}) == '<a/>'

    def test_bad_base64_body(self):
        with self.assertRaises(RequestParseError) as cm:
            get_body({'body': 'not base64!', 'isBase64Encoded': True})

        assert cm.exception.status_code == 400


class TestResolve(unittest.TestCase):
    def test_plain_value(self):
        value = object()
        assert resolve(value) is value

    def test_coroutine(self):
        async def f():
            await asyncio.sleep(0)
            return 42

        assert resolve(f()) == 42

    def test_future_like(self):
        class Awaitable(object):
            def __await__(self):
                yield from asyncio.sleep(0).__await__()
                return 'done'

        assert resolve(Awaitable()) == 'done'

    def test_exception(self):
        async def f():
            raise ValueError("boom")

        with self.assertRaises(ValueError):
            resolve(f())


if __name__ == '__main__':
    unittest.main()
