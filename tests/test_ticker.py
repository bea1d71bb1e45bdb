"""Tests for presentation tickers."""

import asyncio
import random
from datetime import datetime, timezone

from goaltracker.core.catalog import QUOTES
from goaltracker.dashboard.ticker import (
    Headline,
    Ticker,
    format_clock,
    headline_tickers,
    pick_quote,
)


def test_format_clock_uses_display_zone():
    now = datetime(2024, 1, 15, 4, 0, tzinfo=timezone.utc)
    assert format_clock(now, "Asia/Kolkata") == "Monday, 15 January 2024 - 09:30:00"


def test_format_clock_treats_naive_as_utc():
    now = datetime(2024, 1, 15, 20, 0)
    assert format_clock(now, "Asia/Kolkata").startswith("Tuesday, 16 January 2024")


def test_pick_quote():
    assert pick_quote(random.Random(1)) in QUOTES


def test_tick_calls_handler():
    calls = []
    ticker = Ticker("test", 1, lambda: calls.append(1))
    ticker.tick()
    ticker.tick()
    assert calls == [1, 1]
    assert ticker.ticks == 2


def test_failing_handler_does_not_raise():
    def boom():
        raise RuntimeError("nope")

    ticker = Ticker("test", 1, boom)
    ticker.tick()
    assert ticker.ticks == 1


def test_headline_tickers_refresh_headline():
    headline = Headline()
    clock, quote = headline_tickers(headline, "Asia/Kolkata", 60, 30)

    clock.tick()
    quote.tick()

    assert headline.clock_text
    assert headline.quote in QUOTES
    assert clock.interval == 60
    assert quote.interval == 30


def test_start_and_stop():
    calls = []

    async def scenario():
        ticker = Ticker("fast", 0.01, lambda: calls.append(1))
        ticker.start()
        await asyncio.sleep(0.05)
        await ticker.stop()
        return ticker

    ticker = asyncio.run(scenario())
    assert ticker.ticks >= 1
    assert len(calls) == ticker.ticks
