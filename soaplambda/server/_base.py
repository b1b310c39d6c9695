
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

"""The ``soaplambda.server._base`` module contains the :class:`Dispatcher`, the
per-request state machine that every transport hands its events to.

Each request goes through the following stages, in this order. Any of them
can end the request:

    1. The event is normalized by the ``event_parser`` option, if any.
    2. The ``authorize`` option, if any, is consulted. A falsy answer ends the
       request with a 403.
    3. The service is resolved from the last segment of the path. Unknown
       services end the request with a 404.
    4. A GET with a ``wsdl`` query key returns the wsdl document. A POST is
       dispatched to an operation. Anything else gets a 405.
    5. The body is parsed, the operation is looked up (501 when missing),
       called with the parsed inputs and its return value is rendered.

Every stage returns either a :class:`soaplambda.Success` or a
:class:`soaplambda.Fault`. Faults are logged and rendered by the response
builder, so every response carries an xml body.
"""

import logging
logger = logging.getLogger(__name__)

from inspect import isawaitable

from soaplambda._base import Fault
from soaplambda._base import HttpResponse
from soaplambda._base import Success
from soaplambda.config import ServerOptions
from soaplambda.const import FALLBACK_FAULT
from soaplambda.const import ansi_color as color
from soaplambda.const.http import HTTP_200
from soaplambda.error import AccessForbiddenError
from soaplambda.error import MethodNotAllowedError
from soaplambda.error import OperationNotImplementedError
from soaplambda.error import ServiceNotFoundError
from soaplambda.util import resolve
from soaplambda.util.event import get_body
from soaplambda.util.event import get_http_method
from soaplambda.util.event import get_path
from soaplambda.util.event import get_query_parameters
from soaplambda.util.event import get_service_name
from soaplambda.util.event import is_wsdl_request
from soaplambda.util.logtools import log_fault


_big_header = ('=' * 20) + ' '
_big_footer = ' ' + ('=' * 20)


def _fault(error):
    fault = Fault.from_exception(error)

    # only errors that were actually raised have a traceback worth logging
    exc = None
    if getattr(error, '__traceback__', None) is not None:
        exc = error

    log_fault(fault, exc=exc, log=logger)
    return fault


class _Call(object):
    """What's left to do once a request was routed to an operation."""

    __slots__ = ('definition', 'descriptor')

    def __init__(self, definition, descriptor):
        self.definition = definition
        self.descriptor = descriptor

    def __call__(self):
        return self.definition.implementation.invoke(
                               self.descriptor.operation, self.descriptor.values)


class Dispatcher(object):
    """Routes events to the services in a registry.

    The dispatcher keeps no per-request state, so a single instance can serve
    any number of concurrent requests.

    :param registry: A :class:`soaplambda.registry.ServiceRegistry` instance.
    :param request_parser: A :class:`soaplambda.protocol.RequestParserBase`
        instance.
    :param response_builder: A :class:`soaplambda.protocol.ResponseBuilderBase`
        instance.
    :param options: A :class:`soaplambda.config.ServerOptions` instance.
    """

    def __init__(self, registry, request_parser, response_builder,
                                                                  options=None):
        self.registry = registry
        self.request_parser = request_parser
        self.response_builder = response_builder

        if options is None:
            options = ServerOptions()
        self.options = options

    def normalize_event(self, event):
        event_parser = self.options.event_parser
        if event_parser is None:
            return Success(event)

        try:
            return Success(event_parser(event))

        except Exception as e:
            return _fault(e)

    def authorize(self, event):
        authorize = self.options.authorize
        if authorize is None:
            return Success(event)

        try:
            allowed = authorize(event)

        except Exception as e:
            return _fault(e)

        if not allowed:
            return _fault(AccessForbiddenError())

        return Success(event)

    def resolve_service(self, event):
        name = get_service_name(get_path(event))

        definition = None
        if name is not None:
            definition = self.registry.get(name, None)

        if definition is None:
            logger.error("The service %r was not found", name)
            logger.debug("Available services are: %r", sorted(self.registry))
            return _fault(ServiceNotFoundError())

        logger.info("Received a request for service %r", name)
        return Success(definition)

    def parse_request(self, event):
        try:
            descriptor = self.request_parser.get_operation(get_body(event))

        except Exception as e:
            return _fault(e)

        logger.debug("Received a request for operation %r with %d input(s)",
                                 descriptor.operation, len(descriptor.inputs))
        return Success(descriptor)

    def lookup_operation(self, definition, descriptor):
        if descriptor.operation not in definition.implementation:
            logger.debug("%r supports %r", definition.name,
                          sorted(definition.implementation.supported_operations))
            return _fault(OperationNotImplementedError())

        return Success(_Call(definition, descriptor))

    def render_success(self, value):
        try:
            body = self.response_builder.success(value)

        except Exception as e:
            return _fault(e)

        logger.debug("Sending the response body as: %s", body)
        return Success(HttpResponse(body, HTTP_200))

    def render_fault(self, fault):
        """Renders ``fault`` with the response builder. Falls back to a fixed
        fault document with the same status if that fails too."""

        try:
            body = self.response_builder.fault(fault)

        except Exception as e:
            logger.exception(e)
            return HttpResponse(FALLBACK_FAULT, fault.status_code)

        return HttpResponse(body, fault.status_code)

    def route(self, event):
        """Runs every stage up to the operation call. Returns either a
        :class:`HttpResponse` that ends the request or a callable that invokes
        the operation."""

        result = self.normalize_event(event)
        if result.is_fault:
            return self.render_fault(result)
        event = result.value

        result = self.authorize(event)
        if result.is_fault:
            return self.render_fault(result)

        result = self.resolve_service(event)
        if result.is_fault:
            return self.render_fault(result)
        definition = result.value

        method = get_http_method(event)
        if is_wsdl_request(method, get_query_parameters(event)):
            logger.info("Received a request for the wsdl of %r",
                                                                definition.name)
            logger.debug("The wsdl is: %s", definition.wsdl)
            return HttpResponse(definition.wsdl, HTTP_200)

        if method != 'POST':
            logger.error("%r requests to %r are not supported", method,
                                                                definition.name)
            return self.render_fault(_fault(MethodNotAllowedError()))

        result = self.parse_request(event)
        if result.is_fault:
            return self.render_fault(result)

        result = self.lookup_operation(definition, result.value)
        if result.is_fault:
            return self.render_fault(result)

        return result.value

    def safe_route(self, event):
        try:
            return self.route(event)

        except Exception as e:
            return self.render_fault(_fault(e))

    def finish(self, call, result):
        """Renders the outcome of an operation call. ``result`` is either a
        :class:`Success` with the return value or a :class:`Fault`."""

        if result.is_fault:
            return self.render_fault(result)

        logger.debug("The response received from %s.%s: %r",
                       call.definition.name, call.descriptor.operation,
                                                                   result.value)

        result = self.render_success(result.value)
        if result.is_fault:
            return self.render_fault(result)

        return result.value

    def handle(self, event):
        """Handles one event. Awaitables returned by operations are run to
        completion on a private event loop, so this must not be called from a
        running event loop. Use :meth:`handle_async` there.

        Never raises; every failure ends up as a fault response.
        """

        logger.debug("%s%sstart request%s%s", color.LIGHT_BLUE, _big_header,
                                                     _big_footer, color.END_COLOR)
        try:
            call = self.safe_route(event)
            if isinstance(call, HttpResponse):
                return call

            try:
                result = Success(resolve(call()))

            except Exception as e:
                result = _fault(e)

            return self.finish(call, result)

        finally:
            logger.debug("%s%s end request %s%s", color.LIGHT_BLUE, _big_header,
                                                     _big_footer, color.END_COLOR)

    async def handle_async(self, event):
        """Coroutine version of :meth:`handle`. Awaitables returned by
        operations are awaited on the running event loop."""

        logger.debug("%s%sstart request%s%s", color.LIGHT_BLUE, _big_header,
                                                     _big_footer, color.END_COLOR)
        try:
            call = self.safe_route(event)
            if isinstance(call, HttpResponse):
                return call

            try:
                retval = call()
                if isawaitable(retval):
                    retval = await retval
                result = Success(retval)

            except Exception as e:
                result = _fault(e)

            return self.finish(call, result)

        finally:
            logger.debug("%s%s end request %s%s", color.LIGHT_BLUE, _big_header,
                                                     _big_footer, color.END_COLOR)
