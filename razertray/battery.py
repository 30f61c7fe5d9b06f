#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#

"""Battery level sampling for the first battery-powered device."""

from __future__ import annotations

import asyncio
import contextlib
import math
from collections.abc import Callable

from razertray.log import Log
from razertray.openrazer import Feature, OpenRazerError


logger = Log.get("razertray.battery")


def clamp_percent(value: float) -> int:
    """
    Round a raw battery reading into the displayable range [0, 100].

    Halves round up. The reading must be finite.
    """
    return math.floor(min(max(value, 0.0), 100.0) + 0.5)


async def read_battery_percent(manager) -> int | None:
    """
    Read the battery level of the first device which reports one.

    Devices which fail to introspect, lack the battery feature or
    fail to answer are skipped.

    :param manager: a connected Manager
    :return: percent in [0, 100], or None if no device answered
    """
    try:
        paths = await manager.get_devices()
    except OpenRazerError as err:
        logger.debug("Device enumeration failed: %s", err)
        return None

    for path in paths:
        try:
            device = await manager.get_device(path)
        except OpenRazerError as err:
            logger.debug("Skipping %s: %s", path, err)
            continue

        if not device.has_feature(Feature.BATTERY):
            continue

        try:
            percent = await device.get_battery_percent()
        except OpenRazerError as err:
            logger.debug("Battery read failed on %s: %s", path, err)
            continue

        if not math.isfinite(percent):
            logger.debug("Ignoring battery reading %r from %s", percent, path)
            continue

        return clamp_percent(percent)

    return None


class BatteryMonitor:
    """
    Periodically samples the battery level.

    The callback receives the latest known level after every
    poll. A failed poll keeps the previous level; the loop keeps
    running until stop() is called.
    """

    def __init__(self, manager, callback: Callable[[int], None], interval: float = 1.0):
        if not interval > 0:
            raise ValueError("interval must be positive")

        self._manager = manager
        self._callback = callback
        self._interval = interval
        self._value = 0
        self._task = None

    @property
    def value(self) -> int:
        return self._value

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def poll(self) -> int:
        """Poll once, update the current value and notify the callback."""
        percent = await read_battery_percent(self._manager)
        if percent is not None:
            self._value = percent
        self._callback(self._value)
        return self._value

    async def _run(self):
        while True:
            try:
                await self.poll()
            except Exception as err:
                logger.exception("Battery poll failed", exc_info=err)
            await asyncio.sleep(self._interval)

    def start(self):
        if self.running:
            return
        self._task = asyncio.ensure_future(self._run())

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
