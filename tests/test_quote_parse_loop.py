"""
Tests del loop de parseo de cotizaciones.
Run with: pytest tests/test_quote_parse_loop.py -v
"""

import asyncio
import json

import pytest

from tests.conftest import CountingStream, FakeChannel, FakeSink
from wicksignal.application.schemas.quote_messages import parse_quote
from wicksignal.application.use_cases.quote_parse_loop import QuoteParseLoop, QuoteStreamState
from wicksignal.domain.exceptions.domain_errors import ProtocolMismatchError, TransportSendError
from wicksignal.domain.services.frame_codec import encode_frame
from wicksignal.domain.value_objects.quote import Quote

SAMPLE = (
    '{"m":"q","p":["qs_abc", {"n":"BTCUSDT:CRYPTO","v":{"lp":34200.0,'
    '"ch":-0.0005,"chp":-0.0015,"volume":0.0}}]}'
)


# ============================================================================
# parse_quote
# ============================================================================

class TestParseQuote:

    def test_full_values(self):
        assert parse_quote(json.loads(SAMPLE)) == Quote(
            symbol="BTCUSDT:CRYPTO",
            price=34200.0,
            change=-0.0005,
            change_percent=-0.0015,
            volume=0.0,
        )

    def test_missing_values_default_to_zero(self):
        quote = parse_quote({"m": "qsd", "p": ["qs_a", {"n": "X:Y", "v": {"lp": 5}}]})
        assert quote == Quote(symbol="X:Y", price=5.0)

    def test_non_numeric_values_treated_as_absent(self):
        quote = parse_quote({"m": "qsd", "p": ["qs_a", {"n": "X:Y", "v": {"ch": "n/a"}}]})
        assert quote.change == 0.0

    @pytest.mark.parametrize("obj", [
        {"session_id": "abc"},
        {"m": "qsd", "p": ["qs_a"]},
        {"m": "qsd", "p": ["qs_a", ["list"]]},
        {"m": "qsd", "p": ["qs_a", {"v": {"lp": 1}}]},
        {"m": "qsd", "p": ["qs_a", {"n": "X:Y"}]},
    ])
    def test_shape_mismatch(self, obj):
        with pytest.raises(ProtocolMismatchError):
            parse_quote(obj)


# ============================================================================
# QuoteParseLoop
# ============================================================================

class TestQuoteParseLoop:

    def test_reports_quote(self, channel, sink):
        loop = QuoteParseLoop(channel, sink)
        state = asyncio.run(loop.handle_chunk(SAMPLE))

        assert state is QuoteStreamState.ACTIVE
        assert sink.quotes == [Quote("BTCUSDT:CRYPTO", 34200.0, -0.0005, -0.0015, 0.0)]
        assert channel.sent == []

    def test_multiplexed_frames_report_each_quote(self, channel, sink):
        a = {"m": "qsd", "p": ["qs_a", {"n": "A", "v": {"lp": 1}}]}
        b = {"m": "qsd", "p": ["qs_a", {"n": "B", "v": {"lp": 2}}]}
        raw = encode_frame(json.dumps(a)) + encode_frame(json.dumps(b))

        asyncio.run(QuoteParseLoop(channel, sink).handle_chunk(raw))

        assert [q.symbol for q in sink.quotes] == ["A", "B"]

    def test_control_frame_dropped_silently(self, channel, sink):
        loop = QuoteParseLoop(channel, sink)
        raw = encode_frame('{"m":"quote_list_fields","p":["qs_a",["lp"]]}')
        state = asyncio.run(loop.handle_chunk(raw))

        assert state is QuoteStreamState.ACTIVE
        assert sink.quotes == []
        assert channel.sent == []
        assert loop.stats["frames_dropped"] == 1

    def test_keepalive_echoed(self, channel, sink):
        loop = QuoteParseLoop(channel, sink)
        asyncio.run(loop.handle_chunk("~m~4~m~~h~1"))

        assert channel.sent == ["~m~4~m~~h~1"]
        assert loop.stats["keepalives_sent"] == 1

    def test_keepalive_with_longer_counter(self, channel, sink):
        asyncio.run(QuoteParseLoop(channel, sink).handle_chunk("~m~5~m~~h~42"))
        assert channel.sent == ["~m~5~m~~h~42"]

    def test_header_only_chunk_not_echoed(self, channel, sink):
        asyncio.run(QuoteParseLoop(channel, sink).handle_chunk("~m~0~m~"))
        assert channel.sent == []

    def test_unexpected_keepalive_echoed_by_default(self, channel, sink):
        asyncio.run(QuoteParseLoop(channel, sink).handle_chunk("~m~12~m~garbage!"))
        assert channel.sent == [encode_frame("~garbage!")]

    def test_unexpected_keepalive_dropped_when_strict(self, channel, sink):
        loop = QuoteParseLoop(channel, sink, strict_keepalive=True)
        asyncio.run(loop.handle_chunk("~m~12~m~garbage!"))
        assert channel.sent == []
        asyncio.run(loop.handle_chunk("~m~4~m~~h~9"))
        assert channel.sent == ["~m~4~m~~h~9"]

    @pytest.mark.parametrize("chunk", [
        '~m~60~m~{"m":"quote_completed","p":["qs_a","BINANCE:BTCUSDT"]}',
        '~m~40~m~{"session_id":"<0.1.2>_abc","timestamp":1}',
    ])
    def test_control_marker_terminates(self, channel, sink, chunk):
        loop = QuoteParseLoop(channel, sink)
        assert asyncio.run(loop.handle_chunk(chunk)) is QuoteStreamState.TERMINATED
        assert loop.state is QuoteStreamState.TERMINATED
        assert sink.quotes == []

    def test_no_reads_after_termination(self, channel, sink):
        stream = CountingStream([
            SAMPLE,
            "~m~4~m~~h~1",
            '{"m":"quote_completed","p":["qs_a"]}',
            SAMPLE,
            "~m~4~m~~h~2",
        ])
        loop = QuoteParseLoop(channel, sink)
        state = asyncio.run(loop.run(stream))

        assert state is QuoteStreamState.TERMINATED
        assert stream.reads == 3
        assert len(sink.quotes) == 1
        assert channel.sent == ["~m~4~m~~h~1"]

    def test_terminated_loop_ignores_chunks(self, channel, sink):
        loop = QuoteParseLoop(channel, sink)
        asyncio.run(loop.handle_chunk("quote_completed"))
        asyncio.run(loop.handle_chunk(SAMPLE))
        assert sink.quotes == []

    def test_stream_end_keeps_active(self, channel, sink):
        loop = QuoteParseLoop(channel, sink)
        state = asyncio.run(loop.run(CountingStream([SAMPLE])))
        assert state is QuoteStreamState.ACTIVE
        assert len(sink.quotes) == 1

    def test_custom_stop_markers(self, channel, sink):
        loop = QuoteParseLoop(channel, sink, stop_markers=["quote_completed"])
        state = asyncio.run(loop.handle_chunk('{"session_id":"x"}'))
        assert state is QuoteStreamState.ACTIVE

    def test_deeply_nested_chunk_does_not_stop_loop(self, channel, sink):
        loop = QuoteParseLoop(channel, sink, strict_keepalive=True)
        stream = CountingStream(["~m~9~m~" + '{"a":' * 100000, SAMPLE])
        state = asyncio.run(loop.run(stream))

        assert state is QuoteStreamState.ACTIVE
        assert len(sink.quotes) == 1
        assert channel.sent == []

    def test_keepalive_send_failure_is_fatal(self):
        loop = QuoteParseLoop(FakeChannel(fail_after=0), FakeSink())
        with pytest.raises(TransportSendError):
            asyncio.run(loop.run(CountingStream(["~m~4~m~~h~1", SAMPLE])))
