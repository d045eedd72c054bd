import unittest

from leb128codec.utils.bigint import (
    add_one,
    from_magnitude_bytes,
    get_bit,
    is_all_ones,
    magnitude_bytes,
    negate,
    set_bit,
    sign_extend,
    twos_complement,
)


class MagnitudeBytesTest(unittest.TestCase):
    """Test conversion between integers and magnitude bytes."""

    def test_zero_is_empty(self):
        self.assertEqual(b'', magnitude_bytes(0))

    def test_sign_is_dropped(self):
        self.assertEqual(b'\x01\x00', magnitude_bytes(256))
        self.assertEqual(b'\x01\x00', magnitude_bytes(-256))

    def test_round_trip(self):
        for value in (1, 255, 256, 624485, 1 << 200):
            self.assertEqual(value, from_magnitude_bytes(magnitude_bytes(value)))


class BitOperationsTest(unittest.TestCase):
    """Test bit get/set and the arithmetic primitives."""

    def test_get_bit(self):
        self.assertEqual(1, get_bit(0b1010, 1))
        self.assertEqual(0, get_bit(0b1010, 2))
        self.assertEqual(0, get_bit(0b1010, 100))

    def test_set_bit(self):
        self.assertEqual(0b1011, set_bit(0b1010, 0))
        self.assertEqual(0b1010, set_bit(0b1010, 1))
        self.assertEqual(0b1000, set_bit(0b1010, 1, 0))
        self.assertEqual(1 << 130, set_bit(0, 130))

    def test_add_one_and_negate(self):
        self.assertEqual(1 << 64, add_one((1 << 64) - 1))
        self.assertEqual(-5, negate(5))
        self.assertEqual(5, negate(-5))


class TwosComplementTest(unittest.TestCase):
    """Test two's-complement conversion over byte-aligned widths."""

    def test_negative_values(self):
        """Negative inputs yield their byte-width two's-complement pattern."""
        self.assertEqual(0xFF, twos_complement(-1))
        self.assertEqual(0x80, twos_complement(-128))
        self.assertEqual(0xBF, twos_complement(-65))
        self.assertEqual(0x7F, twos_complement(-129))

    def test_reverses_itself(self):
        """Applying the conversion to an all-ones-topped pattern yields the magnitude."""
        self.assertEqual(1, twos_complement(0xFF))
        self.assertEqual(129, twos_complement(0xFF7F))

    def test_zero(self):
        """Zero has no magnitude bytes, leaving just the added one."""
        self.assertEqual(1, twos_complement(0))

    def test_argument_unchanged(self):
        value = -(1 << 90)
        twos_complement(value)
        self.assertEqual(-(1 << 90), value)


class SignExtendTest(unittest.TestCase):
    """Test the fill applied after each logical shift."""

    def test_small_size_fills_low_group(self):
        """Sizes below 7 fill bits 0 through 6."""
        self.assertEqual(0x7F, sign_extend(0, 1))
        self.assertEqual(0x7F, sign_extend(1, 6))

    def test_fills_top_seven_bits(self):
        """Larger sizes fill the seven bits just below size."""
        self.assertEqual(0b11111110, sign_extend(0, 8))
        self.assertEqual(0x7F << 13 | 0b101, sign_extend(0b101, 20))

    def test_is_all_ones(self):
        self.assertTrue(is_all_ones(0xFF, 8))
        self.assertTrue(is_all_ones(0x1FF, 8))
        self.assertFalse(is_all_ones(0xFE, 8))
        self.assertTrue(is_all_ones(0, 0))


if __name__ == '__main__':
    unittest.main()
