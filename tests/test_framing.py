"""
Tests for the fixed-width framing primitives.
"""

import base64
import hashlib
import hmac

import pytest

from signedjar.error_handling import BadDigestEncodingError, MalformedFramingError
from signedjar.framing import (
    BASE64_DIGEST_LEN,
    DIGEST_LEN,
    KEY_LEN,
    compute_tag,
    decode_tag,
    encode_tag,
    frame,
    is_split_boundary,
    split_framed,
)


class TestConstants:
    def test_encoded_length_matches_digest_length(self):
        assert len(base64.b64encode(bytes(DIGEST_LEN))) == BASE64_DIGEST_LEN

    def test_key_length(self):
        assert KEY_LEN == 32


class TestTagEncoding:
    """Test tag computation and the canonical base64 codec."""

    def test_compute_tag_is_hmac_sha256(self):
        key = bytes(range(32))
        expected = hmac.new(key, b"payload", hashlib.sha256).digest()
        assert compute_tag(key, b"payload") == expected

    def test_encode_tag_is_fixed_width(self):
        for tag in (bytes(32), b"\xff" * 32, compute_tag(bytes(32), b"x")):
            encoded = encode_tag(tag)
            assert len(encoded) == BASE64_DIGEST_LEN
            assert encoded.endswith(b"=")

    def test_decode_round_trip(self):
        tag = compute_tag(bytes(32), b"value")
        assert decode_tag(encode_tag(tag)) == tag

    @pytest.mark.parametrize(
        "segment",
        [
            b"",
            b"A" * 43,
            b"A" * 45,
            b"A" * 44,  # no padding, decodes to 33 bytes
            b"A" * 42 + b"==",  # decodes to 31 bytes
            b"!" * 43 + b"=",
            b"A" * 20 + b"=" + b"A" * 23,
            b"A" * 42 + b"\xc2\xa3",
            b"A" * 42 + b"-_",
        ],
    )
    def test_decode_rejects_invalid_segments(self, segment):
        with pytest.raises(BadDigestEncodingError):
            decode_tag(segment)

    def test_decode_rejects_non_canonical_trailing_bits(self):
        encoded = encode_tag(bytes(32))
        assert encoded == b"A" * 43 + b"="

        # "B" differs from "A" only in bits that fall off the 32-byte tag
        non_canonical = b"A" * 42 + b"B="
        with pytest.raises(BadDigestEncodingError):
            decode_tag(non_canonical)


class TestSplitBoundary:
    """Test the fixed-offset split and its boundary validation."""

    def test_short_input_is_not_a_boundary(self):
        assert not is_split_boundary(b"A" * 43, text=False)
        assert not is_split_boundary(b"", text=True)

    def test_exact_length_is_a_boundary(self):
        assert is_split_boundary(b"A" * 44, text=True)

    def test_continuation_byte_at_offset_rejected_for_text(self):
        framed = ("y" * 43 + "£").encode("utf-8")
        assert len(framed) == 45
        assert not is_split_boundary(framed, text=True)

    def test_continuation_byte_allowed_for_bytes(self):
        framed = ("y" * 43 + "£").encode("utf-8")
        assert is_split_boundary(framed, text=False)

    def test_multibyte_character_after_offset_is_fine(self):
        framed = ("A" * 44 + "£").encode("utf-8")
        assert is_split_boundary(framed, text=True)

    def test_split_framed(self):
        framed = frame(bytes(32), b"value")
        encoded_tag, value = split_framed(framed)
        assert len(encoded_tag) == BASE64_DIGEST_LEN
        assert value == b"value"

    def test_split_framed_raises_on_bad_boundary(self):
        with pytest.raises(MalformedFramingError):
            split_framed(b"short")
