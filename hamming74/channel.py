"""
Binary Channel Simulation / 二进制信道仿真

Bit-level channel models used to exercise the Hamming(7,4) codec: a binary
symmetric channel with random flips and deterministic error injection.
用于检验汉明(7,4)编解码器的比特级信道模型：随机翻转的二进制对称信道，以及确定性错误注入。
"""

import numpy as np

from .converter import as_bit_array


class BinarySymmetricChannel:
    """
    Binary Symmetric Channel (BSC) / 二进制对称信道

    Every transmitted bit is flipped independently with the crossover
    probability p. Hard-decision demodulation of an AWGN channel reduces to
    a BSC whose p is the demodulator's raw bit error rate.

    每个传输比特以交叉概率p独立翻转。AWGN信道经硬判决解调后等效为BSC，
    其p即解调器的原始误码率。
    """

    def __init__(self, crossover_probability, seed=None):
        """
        Initialize BSC / 初始化二进制对称信道

        Parameters / 参数:
        ----------------
        crossover_probability : float
            Bit flip probability p in [0, 1] / 比特翻转概率p
        seed : int, optional
            Seed for the random generator / 随机数生成器种子
        """
        if not 0.0 <= crossover_probability <= 1.0:
            raise ValueError(
                'Crossover probability must lie in [0, 1], got %r' % crossover_probability)
        self.crossover_probability = float(crossover_probability)
        self.rng = np.random.default_rng(seed)

    def simulate(self, bit_stream):
        """
        Pass bits through the channel / 比特通过信道

        Parameters / 参数:
        ----------------
        bit_stream : array_like (int, 0/1)
            Transmitted bits / 发送比特

        Returns / 返回:
        -------------
        received : np.ndarray (uint8, 0/1)
            Received bits; the input is left untouched / 接收比特，输入保持不变
        """
        bit_stream = as_bit_array(bit_stream)
        if self.crossover_probability <= 0:
            return bit_stream.copy()

        error_pattern = self.rng.random(len(bit_stream)) < self.crossover_probability
        return bit_stream ^ error_pattern.astype(np.uint8)


def flip_bits(bit_stream, positions):
    """Return a copy of ``bit_stream`` with the bits at ``positions`` complemented."""
    received = as_bit_array(bit_stream)
    positions = np.asarray(positions, dtype=int)
    # Repeated positions would cancel out under fancy-index assignment
    if len(np.unique(positions)) != len(positions):
        raise ValueError('Flip positions must be distinct')
    received[positions] ^= 1
    return received
