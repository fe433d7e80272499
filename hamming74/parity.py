"""
Parity and Syndrome Computation / 校验位与伴随式计算

Even-parity checks over the standard Hamming parity groups and the syndrome
that combines them. Both functions work for any codeword length; the fixed
(7,4) layout lives in ``codec``.

基于标准汉明校验组的偶校验计算，以及由其组合而成的伴随式。
两个函数均适用于任意码长；固定的(7,4)布局见``codec``模块。
"""

import numpy as np


def parity_check(codeword, exponent):
    """
    Even parity of one Hamming parity group / 计算单个汉明校验组的偶校验

    The group for exponent p holds every bit whose 1-based position has
    bit p set, i.e. 0-based indices i with ``(i + 1) & 2**p != 0``.
    指数p对应的校验组包含1起始位置的第p位为1的所有比特。

    Parameters / 参数:
    ----------------
    codeword : array_like (int, 0/1)
        Codeword bits / 码字比特
    exponent : int
        Parity exponent p (0 for P1, 1 for P2, 2 for P4) / 校验指数p

    Returns / 返回:
    -------------
    parity : int
        XOR of the selected bits (0 or 1) / 所选比特的异或值
    """
    codeword = np.asarray(codeword)
    mask = 1 << exponent
    if len(codeword) < mask:
        raise ValueError(
            'Codeword of %d bits has no parity position for exponent %d'
            % (len(codeword), exponent))

    # Scan from the parity bit's own position onward
    positions = np.arange(mask - 1, len(codeword))
    group = positions[((positions + 1) & mask) != 0]
    return int(np.sum(codeword[group]) % 2)


def parity_positions(length):
    """0-based parity indices of a codeword: those whose 1-based value is a power of two."""
    positions = []
    p = 0
    while (1 << p) <= length:
        positions.append((1 << p) - 1)
        p += 1
    return positions


def syndrome(codeword):
    """
    Calculate the error syndrome / 计算伴随式

    Parameters / 参数:
    ----------------
    codeword : array_like (int, 0/1)
        Received codeword / 接收码字

    Returns / 返回:
    -------------
    syndrome : int
        0 if every parity check passes, otherwise the 1-based position of
        the single flipped bit (only meaningful under the single-error
        assumption).
        全部校验通过时为0，否则为单个翻转比特的1起始位置。
    """
    codeword = np.asarray(codeword)
    result = 0
    for p, _ in enumerate(parity_positions(len(codeword))):
        result |= parity_check(codeword, p) << p
    return result
