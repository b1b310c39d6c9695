
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


"""Colour markers for the request delimiters in debug logs. They are empty
strings unless :func:`enable_color` is called. Read them through the module,
e.g. ``ansi_color.LIGHT_BLUE``, so that toggling takes effect."""

_CODES = {
    'LIGHT_GREEN': "\033[1;32m",
    'LIGHT_RED': "\033[1;31m",
    'LIGHT_BLUE': "\033[1;34m",
    'END_COLOR': "\033[0m",
}

LIGHT_GREEN = ""
LIGHT_RED = ""
LIGHT_BLUE = ""
END_COLOR = ""


def _set_colors(enabled):
    g = globals()
    for k, v in _CODES.items():
        g[k] = v if enabled else ""


def enable_color():
    """Sets the colour markers to ANSI colour codes."""

    _set_colors(True)


def disable_color():
    """Sets the colour markers back to empty strings."""

    _set_colors(False)
