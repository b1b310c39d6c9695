
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

"""
This module contains the :class:`Service` class and the
:class:`ServiceImplementation` capability set the dispatcher talks to.
"""

import logging
logger = logging.getLogger(__name__)

from collections.abc import Mapping
from inspect import isclass

from soaplambda.error import ConfigurationError
from soaplambda.error import OperationNotImplementedError


class ServiceMeta(type):
    """Collects the methods tagged with @operation into ``public_methods``,
    including the ones inherited from base services."""

    def __init__(self, cls_name, cls_bases, cls_dict):
        super(ServiceMeta, self).__init__(cls_name, cls_bases, cls_dict)

        self.public_methods = {}
        for base in reversed(cls_bases):
            self.public_methods.update(getattr(base, 'public_methods', {}))

        own_methods = {}
        for k, v in cls_dict.items():
            if not getattr(v, '_is_operation', False):
                continue

            # operations don't get self, just like @srpc functions.
            setattr(self, k, staticmethod(v))

            name = v._operation_name
            if name is None:
                name = k

            if name in own_methods:
                raise ConfigurationError("Operation %r is defined more than "
                                                "once in %r" % (name, cls_name))

            own_methods[name] = v

        self.public_methods.update(own_methods)


class Service(object, metaclass=ServiceMeta):
    """Subclass this to define a soap service. Only methods tagged with the
    :func:`soaplambda.decorator.operation` decorator are exposed."""

    __service_name__ = None
    """The name of this service definition. Defaults to the class name."""

    @classmethod
    def get_service_name(cls):
        if cls.__service_name__ is None:
            return cls.__name__
        else:
            return cls.__service_name__


class ServiceImplementation(object):
    """The set of operations a service supports. Built once at registration
    time, read-only thereafter.

    :param operations: A mapping of operation names to callables.
    :param name: Used in log messages only.
    """

    def __init__(self, operations, name=None):
        self.__operations = dict(operations)
        self.name = name

        self.supported_operations = frozenset(self.__operations)

        for k, v in self.__operations.items():
            if not callable(v):
                raise ConfigurationError("Operation %r of service %r is not "
                                                         "callable" % (k, name))

    @classmethod
    def from_object(cls, impl, name=None):
        """Builds the capability set from a :class:`Service` subclass or
        instance, a mapping of names to callables or any object whose public
        callable attributes are the operations."""

        if isinstance(impl, ServiceImplementation):
            return impl

        if impl is None:
            raise ConfigurationError("Service %r has no implementation" % name)

        if (isclass(impl) and issubclass(impl, Service)) or \
                                                     isinstance(impl, Service):
            return cls(impl.public_methods, name=name)

        if isinstance(impl, Mapping):
            return cls(((k, v) for k, v in impl.items() if callable(v)),
                                                                      name=name)

        operations = {}
        for k in dir(impl):
            if k.startswith('_'):
                continue

            v = getattr(impl, k)
            if callable(v):
                operations[k] = v

        return cls(operations, name=name)

    def __contains__(self, name):
        return name in self.supported_operations

    def __len__(self):
        return len(self.supported_operations)

    def lookup(self, name):
        """Returns the callable behind the operation or None when the service
        doesn't support it."""

        return self.__operations.get(name, None)

    def invoke(self, name, args):
        """Calls the operation with ``args`` as positional arguments. The
        return value can be an awaitable, it's the caller's job to wait for
        it."""

        f = self.lookup(name)
        if f is None:
            raise OperationNotImplementedError()

        logger.debug("Invoking %s.%s with %d argument(s)", self.name, name,
                                                                      len(args))
        return f(*args)

    def __repr__(self):
        return "%s(%r, %r)" % (self.__class__.__name__, self.name,
                                              sorted(self.supported_operations))
