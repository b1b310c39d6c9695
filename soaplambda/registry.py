
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

"""The ``soaplambda.registry`` module contains the read-only registry of the
services a server exposes.

Every service gets its wsdl document loaded and checked for well-formedness
once, when the registry is built. A service whose wsdl can't be read or parsed
makes the whole construction fail.
"""

import logging
logger = logging.getLogger(__name__)

import io
import os

from collections.abc import Mapping

from lxml import etree
from lxml.etree import XMLSyntaxError

from soaplambda.error import ConfigurationError
from soaplambda.error import WsdlError
from soaplambda.service import ServiceImplementation


def read_wsdl(path):
    """Returns the contents of the wsdl file at ``path`` as text."""

    try:
        with io.open(os.path.abspath(path), 'r', encoding='utf8') as f:
            return f.read()

    except (OSError, UnicodeDecodeError) as e:
        logger.error("%r while reading %r", e, path)
        raise WsdlError("Cannot read the wsdl file: %s" % (path,), path=path)


def check_wsdl(wsdl, source):
    """Raises :class:`WsdlError` unless ``wsdl`` is well-formed xml."""

    # no entity resolution or network access, we only need well-formedness.
    parser_kwargs = dict(resolve_entities=False, no_network=True)

    if isinstance(wsdl, str):
        # text is already decoded, so whatever encoding the xml declaration
        # names doesn't apply to it.
        wsdl = wsdl.encode('utf8')
        parser_kwargs['encoding'] = 'utf-8'

    try:
        etree.fromstring(wsdl, etree.XMLParser(**parser_kwargs))

    except (XMLSyntaxError, ValueError, TypeError) as e:
        logger.error("%r in wsdl document from %s", e, source)
        raise WsdlError("Cannot parse the wsdl file correctly: %s" % (source,),
                                                                    path=source)


class ServiceDefinition(object):
    """A named service: its wsdl text and its implementation.

    :param name: The name that the last segment of the request path is
        matched against.
    :param wsdl: The wsdl document as text.
    :param implementation: A :class:`ServiceImplementation` instance.
    :param wsdl_path: The file the wsdl was read from, if any.
    """

    __slots__ = ('name', 'wsdl', 'implementation', 'wsdl_path')

    def __init__(self, name, wsdl, implementation, wsdl_path=None):
        self.name = name
        self.wsdl = wsdl
        self.implementation = implementation
        self.wsdl_path = wsdl_path

    @classmethod
    def from_config(cls, name, entry):
        """Builds a definition from a ``{wsdlPath | wsdlContents, service}``
        mapping. The snake_case spellings ``wsdl_path`` and ``wsdl_contents``
        are accepted too."""

        if not isinstance(entry, Mapping):
            raise ConfigurationError("Configuration of service %r must be a "
                                     "mapping, not %r" % (name, type(entry)))

        wsdl_path = entry.get('wsdlPath', entry.get('wsdl_path', None))
        if wsdl_path:
            wsdl = read_wsdl(wsdl_path)
            source = wsdl_path

        else:
            wsdl = entry.get('wsdlContents', entry.get('wsdl_contents', None))
            source = name

            if wsdl is None:
                raise WsdlError("Service %r has neither a wsdl path nor wsdl "
                                                          "contents" % (name,))

        check_wsdl(wsdl, source)

        if isinstance(wsdl, bytes):
            wsdl = wsdl.decode('utf8')

        impl = ServiceImplementation.from_object(entry.get('service', None),
                                                                      name=name)

        return cls(name, wsdl, impl, wsdl_path=wsdl_path)

    def __repr__(self):
        return "%s(%r, %r)" % (self.__class__.__name__, self.name,
                                                            self.implementation)


class ServiceRegistry(Mapping):
    """Immutable mapping of service names to :class:`ServiceDefinition`
    instances. There's no way to add or remove services after construction.

    :param definitions: An iterable of :class:`ServiceDefinition` instances.
    """

    def __init__(self, definitions=()):
        self.__services = {}

        for d in definitions:
            if d.name in self.__services:
                raise ConfigurationError("Service %r is defined more than "
                                                             "once" % (d.name,))
            self.__services[d.name] = d

    @classmethod
    def from_factory(cls, factory):
        """Builds the registry from a zero-argument callable (or a mapping)
        returning ``{name: {wsdlPath | wsdlContents, service}}``."""

        if factory is None:
            return cls()

        if callable(factory) and not isinstance(factory, Mapping):
            config = factory()
        else:
            config = factory

        if config is None:
            return cls()

        if not isinstance(config, Mapping):
            raise ConfigurationError("services must be a mapping or a callable "
                                     "that returns one, not %r" % type(config))

        retval = cls(ServiceDefinition.from_config(k, v)
                                                       for k, v in config.items())

        logger.info("Registered %d service(s): %s", len(retval),
                                                        ', '.join(sorted(retval)))
        return retval

    def __getitem__(self, name):
        return self.__services[name]

    def __iter__(self):
        return iter(self.__services)

    def __len__(self):
        return len(self.__services)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, sorted(self.__services))
