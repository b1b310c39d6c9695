
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

"""The ``soaplambda.config`` module contains the options object that
configures a :class:`soaplambda.server.aws_lambda.SoapServer`.

Options can be given either with the snake_case names below or with the
camelCase names that javascript-style configuration objects use::

    ServerOptions.from_mapping({
        'requestParserOptions': {'huge_tree': True},
        'authorize': lambda event: event['headers'].get('x-api-key') == KEY,
    })
"""

import logging
logger = logging.getLogger(__name__)

from collections.abc import Mapping

from soaplambda.error import ConfigurationError


_ALIASES = {
    'requestParserOptions': 'request_parser_options',
    'responseParserOptions': 'response_parser_options',
    'responseBuilderOptions': 'response_parser_options',
    'eventParser': 'event_parser',
}


class ServerOptions(object):
    """Immutable server options.

    :param request_parser_options: Keyword arguments for the request parser.
    :param response_parser_options: Keyword arguments for the response
        builder.
    :param event_parser: A callable that gets the raw event and returns the
        event the dispatcher works on.
    :param authorize: A callable that gets the (parsed) event and returns a
        falsy value to reject the request with a 403.
    """

    __slots__ = ('request_parser_options', 'response_parser_options',
                                                    'event_parser', 'authorize')

    def __init__(self, request_parser_options=None, response_parser_options=None,
                                              event_parser=None, authorize=None):
        for name, value in (('event_parser', event_parser),
                                                      ('authorize', authorize)):
            if value is not None and not callable(value):
                raise ConfigurationError("%s must be callable, not %r" % (name,
                                                                   type(value)))

        for name, value in (('request_parser_options', request_parser_options),
                           ('response_parser_options', response_parser_options)):
            if value is not None and not isinstance(value, Mapping):
                raise ConfigurationError("%s must be a mapping, not %r" % (name,
                                                                   type(value)))

        object.__setattr__(self, 'request_parser_options',
                                             dict(request_parser_options or {}))
        object.__setattr__(self, 'response_parser_options',
                                            dict(response_parser_options or {}))
        object.__setattr__(self, 'event_parser', event_parser)
        object.__setattr__(self, 'authorize', authorize)

    def __setattr__(self, key, value):
        raise AttributeError("%s instances are read-only"
                                                     % self.__class__.__name__)

    @classmethod
    def from_mapping(cls, options):
        """Builds a :class:`ServerOptions` from a dict. Unknown keys raise
        :class:`ConfigurationError`."""

        if options is None:
            return cls()

        if isinstance(options, ServerOptions):
            return options

        if not isinstance(options, Mapping):
            raise ConfigurationError("options must be a mapping, not %r"
                                                                % type(options))

        kwargs = {}
        for k, v in options.items():
            key = _ALIASES.get(k, k)
            if key not in cls.__slots__:
                raise ConfigurationError("Unknown option %r" % (k,))
            kwargs[key] = v

        return cls(**kwargs)

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, ', '.join(
                      "%s=%r" % (k, getattr(self, k)) for k in self.__slots__))
