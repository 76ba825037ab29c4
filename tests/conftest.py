"""
Fakes en memoria para los puertos. Sin red.
"""

import pytest

from wicksignal.application.ports.outbound_channel import IOutboundChannel
from wicksignal.application.ports.quote_sink import IQuoteSink
from wicksignal.application.ports.symbol_resolver import ISymbolResolver
from wicksignal.application.schemas.symbol_record import SymbolRecord
from wicksignal.domain.exceptions.domain_errors import TransportSendError


class FakeChannel(IOutboundChannel):
    """Registra cada envío. fail_after=N hace fallar el envío N+1."""

    def __init__(self, fail_after=None):
        self.sent = []
        self._fail_after = fail_after

    async def send(self, text):
        if self._fail_after is not None and len(self.sent) >= self._fail_after:
            raise TransportSendError("canal roto", payload=text)
        self.sent.append(text)


class FakeSink(IQuoteSink):

    def __init__(self):
        self.quotes = []

    async def report(self, quote):
        self.quotes.append(quote)


class FakeResolver(ISymbolResolver):

    def __init__(self, record=None, error=None):
        self.record = record or SymbolRecord(symbol="btcusdt", prefix="binance")
        self.error = error
        self.calls = []

    async def resolve(self, pair, category):
        self.calls.append((pair, category))
        if self.error is not None:
            raise self.error
        return self.record


class CountingStream:
    """Async iterator que cuenta cuántos mensajes fueron leídos."""

    def __init__(self, items):
        self._items = list(items)
        self.reads = 0

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self.reads >= len(self._items):
            raise StopAsyncIteration
        item = self._items[self.reads]
        self.reads += 1
        return item


@pytest.fixture
def channel():
    return FakeChannel()


@pytest.fixture
def sink():
    return FakeSink()
