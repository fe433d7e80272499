"""
Hamming(7,4) Channel Coding Blocks / 汉明(7,4)信道编码模块集

This package implements the Hamming(7,4) single-error-correcting code:
parity and syndrome computation, the nibble codec, a stream codec over bits
and bytes, plus channel models and error rate utilities for evaluating it.

本包实现汉明(7,4)单纠错码：校验与伴随式计算、半字节编解码、
比特流与字节流编解码器，以及用于评估的信道模型和误码率工具。
"""

from .parity import parity_check, parity_positions, syndrome
from .codec import (CODEWORD_LENGTH, DATA_POSITIONS, NIBBLE_LENGTH,
                    PARITY_POSITIONS, correct_codeword, decode_nibble,
                    encode_nibble)
from .converter import NibbleConverter, as_bit_array
from .error_correction import Hamming74
from .channel import BinarySymmetricChannel, flip_bits
from .utils import *

__all__ = [
    'parity_check',
    'parity_positions',
    'syndrome',
    'CODEWORD_LENGTH',
    'NIBBLE_LENGTH',
    'DATA_POSITIONS',
    'PARITY_POSITIONS',
    'encode_nibble',
    'decode_nibble',
    'correct_codeword',
    'NibbleConverter',
    'as_bit_array',
    'Hamming74',
    'BinarySymmetricChannel',
    'flip_bits',
    'calculate_bit_error_rate',
    'calculate_qpsk_ber',
    'calculate_block_error_rate',
    'ebn0_db_to_linear'
]
