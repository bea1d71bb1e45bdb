"""Periodic presentation ticks: clock text and rotating quote."""

import asyncio
import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from goaltracker.core.catalog import QUOTES

logger = logging.getLogger(__name__)


@dataclass
class Headline:
    """Presentation-only header state. Never holds goal or entry data."""
    clock_text: str = ""
    quote: str = ""


def format_clock(now: datetime, tz_name: str) -> str:
    """Format a timestamp like 'Monday, 15 January 2024 - 09:30:00' in a zone."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(ZoneInfo(tz_name))
    return f"{local.strftime('%A, %d %B %Y')} - {local.strftime('%H:%M:%S')}"


def pick_quote(rng: Optional[random.Random] = None) -> str:
    """Pick a random motivational quote."""
    return (rng or random).choice(QUOTES)


class Ticker:
    """Calls a handler every `interval` seconds until stopped."""

    def __init__(self, name: str, interval: float, handler: Callable[[], None]):
        self.name = name
        self.interval = interval
        self.handler = handler
        self.ticks = 0
        self._task: Optional[asyncio.Task] = None

    def tick(self):
        """Run the handler once."""
        self.ticks += 1
        try:
            self.handler()
        except Exception as e:
            # A failed refresh leaves the previous headline in place
            logger.warning(f"Ticker {self.name} handler failed: {e}")

    async def run(self):
        """Tick immediately, then at every interval."""
        logger.info(f"Ticker {self.name} started (every {self.interval}s)")
        while True:
            self.tick()
            await asyncio.sleep(self.interval)

    def start(self):
        """Schedule the ticker on the running event loop."""
        if self._task is None:
            self._task = asyncio.create_task(self.run())

    async def stop(self):
        """Cancel the ticker and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info(f"Ticker {self.name} stopped after {self.ticks} ticks")


def headline_tickers(
    headline: Headline,
    tz_name: str,
    clock_interval: float,
    quote_interval: float,
) -> list[Ticker]:
    """Build the clock and quote tickers that refresh a Headline."""

    def refresh_clock():
        headline.clock_text = format_clock(datetime.now(timezone.utc), tz_name)

    def refresh_quote():
        headline.quote = pick_quote()

    return [
        Ticker("clock", clock_interval, refresh_clock),
        Ticker("quote", quote_interval, refresh_quote),
    ]
