import unittest

import numpy as np

from hamming74 import Hamming74, encode_nibble, flip_bits


class Hamming74Test(unittest.TestCase):

    def setUp(self):
        self.hamming = Hamming74()
        self.rng = np.random.default_rng(1234)

    def test_parameters(self):
        self.assertEqual((self.hamming.n, self.hamming.k), (7, 4))
        self.assertAlmostEqual(self.hamming.code_rate, 4 / 7)

    def test_stream_round_trip(self):
        data = self.rng.integers(0, 2, size=400)
        encoded = self.hamming.encode(data)

        self.assertEqual(len(encoded), 700)
        self.assertEqual(self.hamming.decode(encoded).tolist(), data.tolist())

    def test_length_contracts(self):
        for blocks in (0, 1, 5):
            self.assertEqual(len(self.hamming.encode(np.zeros(4 * blocks))), 7 * blocks)
            self.assertEqual(len(self.hamming.decode(np.zeros(7 * blocks))), 4 * blocks)

    def test_malformed_length(self):
        with self.assertRaises(ValueError):
            self.hamming.encode([1, 0, 1, 1, 0])
        with self.assertRaises(ValueError):
            self.hamming.decode([0, 1, 1, 0, 0, 1, 1, 0])
        with self.assertRaises(ValueError):
            self.hamming.decode_bytes(np.zeros(7))

    def test_one_error_per_block(self):
        data = self.rng.integers(0, 2, size=80)
        encoded = self.hamming.encode(data)

        # One flip in every codeword, each at a different offset
        positions = [block * 7 + block % 7 for block in range(20)]
        received = flip_bits(encoded, positions)
        decoded, syndromes = self.hamming.decode_with_syndromes(received)

        self.assertEqual(decoded.tolist(), data.tolist())
        self.assertEqual(syndromes.tolist(), [block % 7 + 1 for block in range(20)])

    def test_clean_syndromes(self):
        encoded = self.hamming.encode(self.rng.integers(0, 2, size=40))
        _, syndromes = self.hamming.decode_with_syndromes(encoded)
        self.assertFalse(np.any(syndromes))

    def test_encode_bytes(self):
        encoded = self.hamming.encode_bytes(b'\xab')
        expected = np.concatenate([encode_nibble([1, 0, 1, 0]), encode_nibble([1, 0, 1, 1])])

        self.assertEqual(len(encoded), 14)
        self.assertEqual(encoded.tolist(), expected.tolist())

    def test_bytes_round_trip(self):
        data = bytes(range(256))
        encoded = self.hamming.encode_bytes(data)

        self.assertEqual(len(encoded), 14 * 256)
        self.assertEqual(self.hamming.decode_bytes(encoded), data)

        received = flip_bits(encoded, np.arange(0, len(encoded), 7) + 3)
        self.assertEqual(self.hamming.decode_bytes(received), data)

    def test_output_buffer(self):
        out = np.full(14, 9, dtype=np.uint8)
        result = self.hamming.encode([1, 0, 1, 1, 0, 0, 0, 0], out=out)

        self.assertIs(result, out)
        self.assertEqual(out[:7].tolist(), [0, 1, 1, 0, 0, 1, 1])
        self.assertEqual(out[7:].tolist(), [0] * 7)

        decoded = np.zeros(8, dtype=np.uint8)
        self.hamming.decode(out, out=decoded)
        self.assertEqual(decoded.tolist(), [1, 0, 1, 1, 0, 0, 0, 0])

    def test_output_buffer_wrong_size(self):
        with self.assertRaises(ValueError):
            self.hamming.encode([1, 0, 1, 1], out=np.zeros(6, dtype=np.uint8))
        with self.assertRaises(ValueError):
            self.hamming.decode(np.zeros(7), out=np.zeros(5, dtype=np.uint8))
        with self.assertRaises(ValueError):
            self.hamming.encode_bytes(b'\x00', out=np.zeros(7, dtype=np.uint8))


if __name__ == '__main__':
    unittest.main()
