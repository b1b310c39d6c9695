
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

from soaplambda.config import ServerOptions
from soaplambda.error import ConfigurationError


class TestServerOptions(unittest.TestCase):
    def test_defaults(self):
        options = ServerOptions()

        assert options.request_parser_options == {}
        assert options.response_parser_options == {}
        assert options.event_parser is None
        assert options.authorize is None

    def test_from_mapping_camel_case(self):
        authorize = lambda event: True
        options = ServerOptions.from_mapping({
            'requestParserOptions': {'huge_tree': True},
            'responseParserOptions': {'pretty_print': True},
            'eventParser': dict,
            'authorize': authorize,
        })

        assert options.request_parser_options == {'huge_tree': True}
        assert options.response_parser_options == {'pretty_print': True}
        assert options.event_parser is dict
        assert options.authorize is authorize

    def test_from_mapping_snake_case(self):
        options = ServerOptions.from_mapping({'event_parser': dict})
        assert options.event_parser is dict

    def test_from_mapping_passthrough(self):
        options = ServerOptions()
        assert ServerOptions.from_mapping(options) is options
        assert ServerOptions.from_mapping(None).authorize is None

    def test_unknown_option(self):
        with self.assertRaises(ConfigurationError):
            ServerOptions.from_mapping({'authorise': lambda e: True})

    def test_bad_values(self):
        with self.assertRaises(ConfigurationError):
            ServerOptions(authorize=True)

        with self.assertRaises(ConfigurationError):
            ServerOptions(event_parser='json')

        with self.assertRaises(ConfigurationError):
            ServerOptions(request_parser_options=['huge_tree'])

        with self.assertRaises(ConfigurationError):
            ServerOptions.from_mapping(['authorize'])

    def test_read_only(self):
        options = ServerOptions()

        with self.assertRaises(AttributeError):
            options.authorize = None

    def test_options_are_copied(self):
        parser_options = {'huge_tree': True}
        options = ServerOptions(request_parser_options=parser_options)
        parser_options['huge_tree'] = False

        assert options.request_parser_options == {'huge_tree': True}


if __name__ == '__main__':
    unittest.main()
