"""
Property-Based Tests for signedjar
==================================

Uses Hypothesis to generate keys, values and garbage and check invariants:
1. Round-trip: verify(K, sign(K, P)) == P for str and bytes plaintexts
2. Determinism: sign(K, P) is stable
3. Tamper sensitivity: any single-byte change is rejected
4. Key sensitivity: a different key rejects
5. Malformed-input safety: verify never raises on arbitrary input
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from signedjar import BASE64_DIGEST_LEN, sign, verify

signing_keys = st.binary(min_size=32, max_size=32)
text_values = st.text(max_size=200)
byte_values = st.binary(max_size=200)


@given(key=signing_keys, value=text_values)
def test_text_round_trip(key, value):
    assert verify(key, sign(key, value)) == value


@given(key=signing_keys, value=byte_values)
def test_bytes_round_trip(key, value):
    assert verify(key, sign(key, value)) == value


@given(key=signing_keys, value=byte_values)
def test_sign_is_deterministic(key, value):
    first = sign(key, value)
    assert sign(key, value) == first
    assert first[BASE64_DIGEST_LEN:] == value


@given(
    key=signing_keys,
    value=byte_values,
    position=st.integers(min_value=0),
    flip=st.integers(min_value=1, max_value=255),
)
def test_single_byte_mutation_rejected(key, value, position, flip):
    framed = bytearray(sign(key, value))
    framed[position % len(framed)] ^= flip
    assert verify(key, bytes(framed)) is None


@given(key=signing_keys, other=signing_keys, value=text_values)
def test_other_key_rejected(key, other, value):
    assume(key != other)
    assert verify(other, sign(key, value)) is None


@settings(max_examples=300)
@given(key=signing_keys, data=st.one_of(st.binary(max_size=120), st.text(max_size=120)))
def test_garbage_never_raises(key, data):
    result = verify(key, data)
    assert result is None or isinstance(result, type(data))


@given(
    key=signing_keys,
    prefix=st.text(alphabet=st.characters(max_codepoint=127), min_size=43, max_size=43),
    char=st.characters(min_codepoint=128),
    tail=text_values,
)
def test_split_inside_character_rejected(key, prefix, char, tail):
    assert verify(key, prefix + char + tail) is None
