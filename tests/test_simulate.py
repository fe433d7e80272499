import unittest

from simulate import simulate_transmission


class SimulateTest(unittest.TestCase):

    def test_clean_channel(self):
        data = b'hamming'
        received, metrics = simulate_transmission(data, 0.0, seed=1)

        self.assertEqual(received, data)
        self.assertEqual(metrics['corrected_blocks'], 0)
        self.assertEqual(metrics['transmitted_bits'], 14 * len(data))
        self.assertAlmostEqual(metrics['code_rate'], 4 / 7)

    def test_fec_beats_uncoded(self):
        data = bytes(range(256)) * 8
        _, metrics_fec = simulate_transmission(data, 0.01, True, seed=3)
        _, metrics_no_fec = simulate_transmission(data, 0.01, False, seed=3)

        self.assertGreater(metrics_fec['corrected_blocks'], 0)
        self.assertLess(metrics_fec['ber_after_correction'],
                        metrics_no_fec['ber_after_correction'])
        self.assertEqual(metrics_no_fec['transmitted_bits'], 8 * len(data))


if __name__ == '__main__':
    unittest.main()
