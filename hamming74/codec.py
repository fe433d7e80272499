"""
Hamming(7,4) Nibble Codec / 汉明(7,4)半字节编解码

Fixed-size specialization of the generic parity routines: one 4-bit nibble
in, one 7-bit codeword out, and back.
通用校验函数的固定长度特化：输入一个4比特半字节，输出一个7比特码字，反之亦然。

Codeword layout (0-based) / 码字布局（0起始）:
    index     0   1   2   3   4   5   6
    content   P1  P2  D1  P4  D2  D3  D4
"""

import numpy as np

from .converter import as_bit_array
from .parity import parity_check, syndrome

NIBBLE_LENGTH = 4
CODEWORD_LENGTH = 7
PARITY_BITS = 3

PARITY_POSITIONS = (0, 1, 3)
DATA_POSITIONS = (2, 4, 5, 6)


def encode_nibble(nibble):
    """
    Encode 4 data bits into a 7-bit codeword / 将4个数据比特编码为7比特码字

    Parameters / 参数:
    ----------------
    nibble : array_like (int, 0/1)
        Exactly 4 data bits / 恰好4个数据比特

    Returns / 返回:
    -------------
    codeword : np.ndarray (uint8, 0/1)
        Valid 7-bit codeword / 有效的7比特码字
    """
    nibble = as_bit_array(nibble, NIBBLE_LENGTH)

    codeword = np.zeros(CODEWORD_LENGTH, dtype=np.uint8)
    codeword[list(DATA_POSITIONS)] = nibble

    # A parity group never contains another parity position
    for p in range(PARITY_BITS):
        codeword[(1 << p) - 1] = parity_check(codeword, p)

    return codeword


def correct_codeword(codeword, in_place=False):
    """
    Locate and flip a single erroneous bit / 定位并翻转单个错误比特

    Parameters / 参数:
    ----------------
    codeword : array_like (int, 0/1)
        Received 7-bit codeword / 接收到的7比特码字
    in_place : bool, default=False
        Correct the caller's array instead of a copy. Requires a writable
        ``np.ndarray`` of dtype uint8.
        直接修正调用方数组而非副本。

    Returns / 返回:
    -------------
    corrected : np.ndarray (uint8, 0/1)
        Corrected codeword / 修正后的码字
    syndrome : int
        Syndrome before correction, 0 if clean / 修正前的伴随式
    """
    # as_bit_array always returns a fresh array
    corrected = as_bit_array(codeword, CODEWORD_LENGTH)
    if in_place:
        if not isinstance(codeword, np.ndarray) or codeword.dtype != np.uint8:
            raise ValueError('In-place correction needs a uint8 ndarray codeword')
        corrected = codeword

    s = syndrome(corrected)
    # Syndromes beyond the codeword are ignored, not reported
    if 0 < s <= CODEWORD_LENGTH:
        corrected[s - 1] ^= 1

    return corrected, s


def decode_nibble(codeword, in_place=False):
    """
    Decode a 7-bit codeword to its 4 data bits / 将7比特码字译码为4个数据比特

    Corrects at most one flipped bit. Two flipped bits are miscorrected as a
    single error at the wrong position; the result is then not the
    transmitted nibble.
    最多纠正一个翻转比特。两个比特翻转时会被误判为另一位置的单比特错误。

    Parameters / 参数:
    ----------------
    codeword : array_like (int, 0/1)
        Received 7-bit codeword / 接收到的7比特码字
    in_place : bool, default=False
        Leave the corrected bits in the caller's array / 将修正结果写回调用方数组

    Returns / 返回:
    -------------
    nibble : np.ndarray (uint8, 0/1)
        Decoded data bits / 译码后的数据比特
    """
    corrected, _ = correct_codeword(codeword, in_place=in_place)
    return corrected[list(DATA_POSITIONS)]
