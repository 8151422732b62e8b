import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixeduint.errors import (
    ArithmeticOverflow,
    FromDecStrErr,
    FromHexError,
    FromStrRadixErr,
    FromStrRadixErrKind,
)
from fixeduint.uint import Uint, construct_uint
from fixeduint.words import WORD_BITS, WORD_MASK

U64 = construct_uint("U64", 1)
U256 = construct_uint("U256", 4)
U512 = construct_uint("U512", 8)

P_DEC = "38873241744847760218045702002058062581688990428170398542849190507947196700873"
BIG_DEC = "21674844646682989462120101885968193938394323990565507610662749"
U256_LIMIT = 1 << (4 * WORD_BITS)

u256_values = st.integers(min_value=0, max_value=U256_LIMIT - 1)


def test_width_attributes():
    assert U256.BITS == 4 * WORD_BITS
    assert U256.BYTES == 4 * 8
    assert U256.MAX.words() == (WORD_MASK,) * 4
    assert U256.max_value() == U256.MAX


def test_construct_uint_rejects_bad_width():
    with pytest.raises(ValueError):
        construct_uint("Bad", 0)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Uint(1)


def test_constructor_validates_ints():
    with pytest.raises(ValueError):
        U256(-1)
    with pytest.raises(ArithmeticOverflow):
        U256(U256_LIMIT)
    assert U256() == U256.zero()


def test_constructor_accepts_bytes_and_hex():
    assert U256(b"\x01\x02") == U256.from_little_endian(b"\x02\x01")
    assert U256("0xff") == U256.from_dec_str("255")


def test_modular_field_example():
    p = U256.from_dec_str(P_DEC)
    p_minus_1 = (p - 1) % p
    p_plus_1 = (p + 1) % p
    assert (p_minus_1 + p_plus_1) % p == 0
    assert (p_minus_1 + p_minus_1) % p == p - 2
    result = p_minus_1
    for _ in range(2):
        result = (p_minus_1 + result) % p
    assert result == p - 3


@given(u256_values)
def test_decimal_round_trip(n):
    value = U256.from_dec_str(str(n))
    assert int(value) == n
    assert str(value) == str(n)


def test_decimal_parse_errors():
    with pytest.raises(FromDecStrErr) as info:
        U256.from_dec_str("12a")
    assert info.value.kind is FromStrRadixErrKind.INVALID_CHARACTER
    with pytest.raises(FromDecStrErr) as info:
        U256.from_dec_str(str(U256_LIMIT))
    assert info.value.kind is FromStrRadixErrKind.INVALID_LENGTH
    assert U256.from_dec_str("").is_zero()
    assert U256.from_dec_str(BIG_DEC) == int(BIG_DEC)


def test_hex_parsing():
    assert U256.from_hex_str("0x" + "f" * 64) == U256.MAX
    assert U256.from_hex_str("abc") == int("abc", 16)
    long_hex = "F" * 70
    assert U512.from_hex_str(long_hex) == int(long_hex, 16)
    with pytest.raises(FromHexError) as info:
        U256.from_hex_str("F" * 65)
    assert info.value.kind is FromStrRadixErrKind.INVALID_LENGTH


def test_hex_invalid_character_reports_position_in_padded_input():
    with pytest.raises(FromHexError) as info:
        U256.from_hex_str("0xg")
    assert info.value.kind is FromStrRadixErrKind.INVALID_CHARACTER
    assert info.value.character == "g"
    assert info.value.index == 1


def test_from_str_radix():
    assert U256.from_str_radix("255", 10) == U256.from_str_radix("ff", 16)
    with pytest.raises(FromStrRadixErr) as info:
        U256.from_str_radix("1", 8)
    assert info.value.kind is FromStrRadixErrKind.UNSUPPORTED_RADIX
    with pytest.raises(FromStrRadixErr) as info:
        U256.from_str_radix("x", 10)
    assert info.value.kind is FromStrRadixErrKind.INVALID_CHARACTER
    assert isinstance(info.value.source, FromDecStrErr)


@given(u256_values)
def test_endian_round_trips(n):
    value = U256(n)
    assert U256.from_big_endian(value.to_big_endian()) == value
    assert U256.from_little_endian(value.to_little_endian()) == value
    assert value.to_big_endian() == value.to_little_endian()[::-1]
    assert U256.from_words(value.words()) == value


def test_endian_length_limits():
    assert len(U256.one().to_big_endian()) == U256.BYTES
    with pytest.raises(ValueError):
        U256.from_big_endian(bytes(U256.BYTES + 1))
    with pytest.raises(ValueError):
        U256.from_words([1, 2])


def test_narrowing_conversions():
    assert U256.MAX.low_u64() == WORD_MASK
    with pytest.raises(ArithmeticOverflow):
        U256(1 << 64).as_u64()
    with pytest.raises(ArithmeticOverflow):
        U256(1 << 32).as_u32()
    assert U256((1 << 128) - 1).as_u128() == (1 << 128) - 1
    with pytest.raises(ArithmeticOverflow):
        U256(1 << 128).as_u128()
    assert U64.MAX.as_usize() == WORD_MASK


def test_to_int():
    assert U256(127).to_int(8, True) == 127
    with pytest.raises(ArithmeticOverflow, match="integer overflow when casting to i8"):
        U256(128).to_int(8, True)
    assert U256(128).to_int(8, False) == 128
    with pytest.raises(ValueError):
        U256(1).to_int(12, False)


def test_zero_bit_counts():
    zero = U256.zero()
    assert zero.bits() == 0
    assert zero.leading_zeros() == U256.BITS
    assert zero.trailing_zeros() == U256.BITS


@given(st.integers(min_value=0, max_value=4 * WORD_BITS - 1))
def test_single_bit_properties(k):
    value = U256.one() << k
    assert value.bit(k)
    assert value.trailing_zeros() == k
    assert value.bits() == k + 1
    assert value.leading_zeros() + value.bits() == U256.BITS


def test_bit_and_byte_bounds():
    data = bytes(range(U256.BYTES))
    value = U256.from_little_endian(data)
    assert [value.byte(i) for i in range(U256.BYTES)] == list(data)
    with pytest.raises(IndexError):
        value.byte(U256.BYTES)
    with pytest.raises(IndexError):
        value.bit(U256.BITS)


@given(u256_values, u256_values.filter(bool))
def test_div_mod_matches_invariant(a, b):
    q, r = U256(a).div_mod(U256(b))
    assert int(q) * b + int(r) == a
    assert r < b


def test_div_mod_bench_values():
    one = U512.from_words([
        8326634216714383706, 15837136097609390493, 13004317189126203332, 7031796866963419685,
        12767554894655550452, 16333049135534778834, 140317443000293558, 598963,
    ])
    two = U512.from_words([
        11707750893627518758, 17679501210898117940, 2472932874039724966, 11177683849610900539,
        2096410819092764509, 8483673822214032535, 36306297304129857, 3453,
    ])
    q, r = one.div_mod(two)
    assert q * two + r == one
    assert r < two
    assert one // two == q and one % two == r


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError, match="division by zero"):
        U256.one().div_mod(0)
    assert U256.one().checked_div(0) is None
    assert U256.one().checked_rem(0) is None


@given(u256_values)
def test_integer_sqrt(n):
    root = int(U256(n).integer_sqrt())
    assert root * root <= n < (root + 1) * (root + 1)


def test_pow():
    two = U256(2)
    assert two.pow(255) == U256.one() << 255
    with pytest.raises(ArithmeticOverflow):
        two.pow(256)
    assert two.overflowing_pow(256) == (U256.zero(), True)
    assert two.checked_pow(256) is None
    assert U256.zero().pow(0) == U256.one()
    assert U256.one().pow(U256.MAX) == U256.one()


@given(u256_values, st.integers(min_value=0, max_value=300))
def test_overflowing_pow_wraps(base, expon):
    result, overflow = U256(base).overflowing_pow(expon)
    assert int(result) == pow(base, expon, U256_LIMIT)
    assert overflow == (base**expon >= U256_LIMIT if expon < 300 or base < 2 else True)


def test_exp10():
    assert [int(U256.exp10(n)) for n in range(5)] == [10**n for n in range(5)]
    with pytest.raises(ArithmeticOverflow):
        U256.exp10(len(str(U256.MAX)))


def test_addition_overflow():
    with pytest.raises(ArithmeticOverflow, match="arithmetic operation overflow"):
        U256.MAX + 1
    assert U256.MAX.overflowing_add(1) == (U256.zero(), True)
    assert U256.MAX.saturating_add(1) == U256.MAX
    assert U256.MAX.checked_add(1) is None


def test_subtraction_underflow():
    with pytest.raises(ArithmeticOverflow):
        U256.zero() - 1
    assert U256.zero().overflowing_sub(1) == (U256.MAX, True)
    assert U256.zero().saturating_sub(1) == U256.zero()
    assert U256.zero().checked_sub(1) is None


def test_multiplication_overflow():
    assert U256.MAX.overflowing_mul(2) == (U256.MAX - 1, True)
    assert U256.MAX.saturating_mul(2) == U256.MAX
    assert U256.MAX.checked_mul(2) is None
    with pytest.raises(ArithmeticOverflow):
        U256.MAX * 2


@given(u256_values, u256_values)
def test_abs_diff_symmetric(a, b):
    x, y = U256(a), U256(b)
    assert x.abs_diff(y) == y.abs_diff(x)
    assert int(x.abs_diff(y)) == abs(a - b)


def test_negation():
    assert U256.one().overflowing_neg() == (U256.MAX, True)
    assert U256.zero().overflowing_neg() == (U256.zero(), False)
    assert U256.zero().checked_neg() == U256.zero()
    assert U256.one().checked_neg() is None


@given(u256_values, u256_values)
def test_bitwise_operations(a, b):
    x, y = U256(a), U256(b)
    assert int(x & y) == a & b
    assert int(x | y) == a | b
    assert int(x ^ y) == a ^ b
    assert ~x == U256.MAX - x


@given(u256_values, st.integers(min_value=0, max_value=300))
def test_shifts(a, k):
    x = U256(a)
    assert int(x << k) == (a << k) % U256_LIMIT
    assert int(x >> k) == a >> k


def test_shift_rejects_negative():
    with pytest.raises(ValueError):
        U256.one() << -1


def test_types_do_not_mix():
    with pytest.raises(TypeError):
        U256(1) + U512(1)
    assert (U256(1) == U512(1)) is False
    with pytest.raises(TypeError):
        U256(1).overflowing_add(U512(1))


def test_ordering_and_hash():
    values = [U256(3), U256(1), U256(2), U256(1)]
    assert sorted(set(values)) == [U256(1), U256(2), U256(3)]
    assert U256(1) < U256(2) <= 2


def test_formatting():
    assert format(U256.MAX, "#x") == "0x" + "f" * 64
    assert format(U256.MAX, "X") == "F" * 64
    assert format(U256.zero(), "x") == "0"
    assert repr(U256(7)) == "U256(7)"
    assert str(U256.from_dec_str(P_DEC)) == P_DEC


def test_single_word_type():
    assert U64.MAX.words() == (WORD_MASK,)
    assert U64.MAX.low_u128() == WORD_MASK
    with pytest.raises(ArithmeticOverflow):
        U64.MAX + 1