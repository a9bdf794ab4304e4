import unittest

from mp3_meta.core.synchsafe import MAX_SYNCHSAFE, decode_synchsafe, encode_synchsafe


class TestSynchsafe(unittest.TestCase):
    def test_zero(self) -> None:
        self.assertEqual(decode_synchsafe(b"\x00\x00\x00\x00"), 0)

    def test_max_representable(self) -> None:
        self.assertEqual(decode_synchsafe(b"\x7f\x7f\x7f\x7f"), 0x0FFFFFFF)
        self.assertEqual(MAX_SYNCHSAFE, 0x0FFFFFFF)

    def test_seven_bits_per_byte_big_endian(self) -> None:
        self.assertEqual(decode_synchsafe(b"\x00\x00\x01\x7f"), 255)
        self.assertEqual(decode_synchsafe(b"\x00\x00\x02\x01"), 257)
        self.assertEqual(decode_synchsafe(b"\x01\x00\x00\x00"), 1 << 21)

    def test_high_bits_are_ignored(self) -> None:
        self.assertEqual(decode_synchsafe(b"\x80\x80\x80\x81"), 1)
        self.assertEqual(decode_synchsafe(b"\xff\xff\xff\xff"), MAX_SYNCHSAFE)

    def test_distinct_inputs_decode_to_distinct_values(self) -> None:
        values = [0, 1, 127, 128, 255, 16383, 16384, 1 << 21, (1 << 21) + 1, MAX_SYNCHSAFE]
        encoded = [encode_synchsafe(v) for v in values]
        self.assertEqual(len(set(encoded)), len(values))
        self.assertEqual([decode_synchsafe(e) for e in encoded], values)
        for data in encoded:
            self.assertTrue(all(b < 0x80 for b in data))

    def test_rejects_wrong_length(self) -> None:
        with self.assertRaises(ValueError):
            decode_synchsafe(b"\x00\x00\x00")

    def test_encode_rejects_out_of_range(self) -> None:
        with self.assertRaises(ValueError):
            encode_synchsafe(-1)
        with self.assertRaises(ValueError):
            encode_synchsafe(MAX_SYNCHSAFE + 1)


if __name__ == "__main__":
    unittest.main()
