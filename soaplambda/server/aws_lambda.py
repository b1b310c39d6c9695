
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

"""The ``soaplambda.server.aws_lambda`` module contains the :class:`SoapServer`
class, which turns a service configuration into a function-as-a-service
handler. ::

    server = SoapServer(services=lambda: {
        'Calculator': {
            'wsdlPath': 'wsdl/calculator.wsdl',
            'service': CalculatorService,
        },
    })

    handler = server.create_handler(debug=False)

The handler takes api gateway proxy events and returns dicts with ``body``,
``statusCode`` and ``headers`` keys.
"""

import logging
logger = logging.getLogger(__name__)

from collections.abc import Mapping

from soaplambda.config import ServerOptions
from soaplambda.error import ConfigurationError
from soaplambda.protocol.soap import SoapRequestParser
from soaplambda.protocol.soap import SoapResponseBuilder
from soaplambda.registry import ServiceRegistry
from soaplambda.server._base import Dispatcher
from soaplambda.util.logtools import set_debug


class SoapServer(object):
    """Builds the service registry, the soap collaborators and the
    dispatcher. Everything is built and validated here, so a broken wsdl
    makes the constructor fail instead of the first request.

    :param services: A zero-argument callable returning a mapping of service
        names to ``{'wsdlPath' | 'wsdlContents', 'service'}`` mappings. A
        mapping is accepted in place of the callable.
    :param options: A :class:`soaplambda.config.ServerOptions` instance or a
        mapping with the same keys.
    :param config: A ``{'services': ..., 'options': ...}`` mapping. Explicit
        ``services`` and ``options`` arguments take precedence over it.
    :param request_parser: Replaces the default
        :class:`soaplambda.protocol.soap.SoapRequestParser`.
    :param response_builder: Replaces the default
        :class:`soaplambda.protocol.soap.SoapResponseBuilder`.
    """

    def __init__(self, services=None, options=None, config=None,
                                   request_parser=None, response_builder=None):
        if config is not None:
            if not isinstance(config, Mapping):
                raise ConfigurationError("config must be a mapping, not %r"
                                                                 % type(config))
            unknown = set(config) - set(('services', 'options'))
            if len(unknown) > 0:
                raise ConfigurationError("Unknown configuration key(s): %s"
                                                   % ', '.join(sorted(unknown)))

            if services is None:
                services = config.get('services', None)
            if options is None:
                options = config.get('options', None)

        self.options = ServerOptions.from_mapping(options)

        if request_parser is None:
            request_parser = SoapRequestParser(
                                          **self.options.request_parser_options)
        if response_builder is None:
            response_builder = SoapResponseBuilder(
                                         **self.options.response_parser_options)

        self.registry = ServiceRegistry.from_factory(services)

        self.dispatcher = Dispatcher(self.registry, request_parser,
                                             response_builder, self.options)

    @property
    def services(self):
        return self.registry

    def handle(self, event):
        """Handles one event and returns the response dict."""

        return self.dispatcher.handle(event).to_dict()

    async def handle_async(self, event):
        """Coroutine version of :meth:`handle`."""

        response = await self.dispatcher.handle_async(event)
        return response.to_dict()

    def create_handler(self, debug=False, is_async=False):
        """Returns a ``handler(event, context)`` callable for the hosting
        environment.

        :param debug: When ``True``, the package logs at DEBUG level.
        :param is_async: When ``True``, the returned handler is a coroutine
            function, for hosts that run their own event loop.
        """

        set_debug(debug)

        if is_async:
            async def handler(event, context=None):
                logger.debug("Received an event: %r", event)
                return await self.handle_async(event)

        else:
            def handler(event, context=None):
                logger.debug("Received an event: %r", event)
                return self.handle(event)

        return handler
