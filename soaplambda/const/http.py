
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

"""The ``soaplambda.const.http`` module contains the Http status codes the
dispatcher uses."""

HTTP_200 = 200
HTTP_400 = 400
HTTP_403 = 403
HTTP_404 = 404
HTTP_405 = 405
HTTP_500 = 500
HTTP_501 = 501


def is_error_status(value):
    """Returns True when ``value`` is an int that can be used as the status
    of an error response."""

    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        return False

    return 400 <= value <= 599
