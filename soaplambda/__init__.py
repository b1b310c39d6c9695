
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

__version__ = '0.1.0'

from soaplambda._base import OperationInput
from soaplambda._base import OperationDescriptor
from soaplambda._base import Success
from soaplambda._base import Fault
from soaplambda._base import HttpResponse

from soaplambda.error import SoapLambdaError
from soaplambda.error import ConfigurationError
from soaplambda.error import WsdlError
from soaplambda.error import SoapError
from soaplambda.error import RequestParseError
from soaplambda.error import AccessForbiddenError
from soaplambda.error import ServiceNotFoundError
from soaplambda.error import MethodNotAllowedError
from soaplambda.error import InternalError
from soaplambda.error import OperationNotImplementedError

from soaplambda.decorator import operation
from soaplambda.service import Service
from soaplambda.service import ServiceImplementation

from soaplambda.registry import ServiceDefinition
from soaplambda.registry import ServiceRegistry

from soaplambda.config import ServerOptions

from soaplambda.protocol.soap import SoapRequestParser
from soaplambda.protocol.soap import SoapResponseBuilder

from soaplambda.server import Dispatcher
from soaplambda.server import SoapServer
