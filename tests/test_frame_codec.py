"""
Tests del codec de frames ~m~<len>~m~<payload>.
Run with: pytest tests/test_frame_codec.py -v
"""

import json

import pytest

from wicksignal.domain.exceptions.domain_errors import ProtocolMismatchError
from wicksignal.domain.services.frame_codec import (
    create_message,
    decode_frames,
    encode_frame,
    extract_json_objects,
    is_heartbeat,
    keepalive_payload,
)


class TestEncode:

    def test_header_uses_byte_length(self):
        assert encode_frame("~h~1") == "~m~4~m~~h~1"
        # "é" ocupa 2 bytes en UTF-8
        assert encode_frame('{"a":"é"}') == '~m~10~m~{"a":"é"}'

    def test_empty_payload(self):
        assert encode_frame("") == "~m~0~m~"

    def test_create_message_is_compact_json(self):
        msg = create_message("quote_create_session", ["qs_abcdefghijkl"])
        payload = '{"m":"quote_create_session","p":["qs_abcdefghijkl"]}'
        assert msg == f"~m~{len(payload)}~m~{payload}"


class TestDecodeFrames:

    @pytest.mark.parametrize("payload", ["~h~12", '{"m":"x","p":[]}', "ñandú", ""])
    def test_round_trip(self, payload):
        assert decode_frames(encode_frame(payload)) == [payload]

    def test_multiplexed_frames(self):
        raw = encode_frame('{"m":"a","p":[]}') + encode_frame("~h~3")
        assert decode_frames(raw) == ['{"m":"a","p":[]}', "~h~3"]

    @pytest.mark.parametrize("raw", ["hello", "~m~4", "~m~x~m~abcd", "~m~10~m~short"])
    def test_malformed(self, raw):
        with pytest.raises(ProtocolMismatchError):
            decode_frames(raw)


class TestExtractJsonObjects:

    def test_bare_json(self):
        text = '{"m":"q","p":["qs_abc",{"n":"X","v":{}}]}'
        assert extract_json_objects(text) == [json.loads(text)]

    def test_json_behind_header(self):
        obj = {"m": "qsd", "p": ["qs_a", {"n": "X", "v": {"lp": 1}}]}
        assert extract_json_objects(encode_frame(json.dumps(obj))) == [obj]

    def test_several_frames_in_one_message(self):
        a = {"m": "qsd", "p": ["qs_a", {"n": "A", "v": {}}]}
        b = {"m": "qsd", "p": ["qs_a", {"n": "B", "v": {}}]}
        raw = encode_frame(json.dumps(a)) + encode_frame(json.dumps(b))
        objects = extract_json_objects(raw)
        assert objects == [a, b]
        assert objects[-1]["p"][1]["n"] == "B"

    def test_ping_has_no_json(self):
        assert extract_json_objects("~m~4~m~~h~1") == []

    def test_truncated_json_is_not_an_object(self):
        assert extract_json_objects('~m~20~m~{"m":"qsd","p":[') == []

    def test_deep_unterminated_nesting(self):
        assert extract_json_objects("~m~9~m~" + '{"a":' * 100000) == []

    def test_object_before_deep_nesting_kept(self):
        raw = '{"m":"a","p":[]}' + '{"a":' * 100000
        assert extract_json_objects(raw) == [{"m": "a", "p": []}]


class TestKeepalive:

    def test_strip_fixed_header(self):
        assert keepalive_payload("~m~4~m~~h~1") == "~h~1"
        assert keepalive_payload("~m~4~m~") == ""

    def test_heartbeat_shape(self):
        assert is_heartbeat("~h~1")
        assert is_heartbeat("~h~1234")
        assert not is_heartbeat("~h~")
        assert not is_heartbeat("m~~h~12")
