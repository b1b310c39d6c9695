
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

"""The ``soaplambda.util`` package contains helpers that don't belong anywhere
else."""

import logging
logger = logging.getLogger(__name__)

import asyncio

from inspect import isawaitable


def run_until_complete(awaitable):
    """Waits for ``awaitable`` on a private event loop and returns its result.
    Must not be called from a running event loop."""

    async def _wait():
        return await awaitable

    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(_wait())
    finally:
        loop.close()


def resolve(value):
    """Returns ``value`` itself, or its result when it's awaitable."""

    if isawaitable(value):
        return run_until_complete(value)

    return value
