
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

"""The ``soaplambda.const.xml`` module contains XML namespace constants."""

NS_XSI = 'http://www.w3.org/2001/XMLSchema-instance'
NS_SOAP11_ENV = 'http://schemas.xmlsoap.org/soap/envelope/'
NS_SOAP12_ENV = 'http://www.w3.org/2003/05/soap-envelope'


def Tnswrap(ns):
    return lambda s: "{%s}%s" % (ns, s)

XSI = Tnswrap(NS_XSI)
SOAP11_ENV = Tnswrap(NS_SOAP11_ENV)
SOAP12_ENV = Tnswrap(NS_SOAP12_ENV)
