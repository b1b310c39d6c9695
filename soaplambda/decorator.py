
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

"""The ``soaplambda.decorator`` module contains the @operation decorator that
tags methods of a :class:`soaplambda.service.Service` subclass as operations
that are reachable from soap requests.
"""


def operation(*args, **kwargs):
    """Tags a function as a public operation. Use it either bare or with an
    explicit name: ::

        class Calculator(Service):
            @operation
            def add(a, b):
                return int(a) + int(b)

            @operation(_operation_name='Subtract')
            def subtract(a, b):
                return int(a) - int(b)

    Operations are called without ``self``, with the request inputs as
    positional arguments.
    """

    def explain(f):
        f._is_operation = True
        f._operation_name = kwargs.get('_operation_name', None)
        return f

    if len(args) == 1 and len(kwargs) == 0 and callable(args[0]):
        return explain(args[0])

    if len(args) > 0:
        raise TypeError("@operation only accepts keyword arguments, got %r"
                                                                       % (args,))

    return explain
