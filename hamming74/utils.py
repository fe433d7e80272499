"""
Utility Functions for Channel Coding / 信道编码工具函数

Bit error rate measurement and theoretical error probabilities for uncoded
and Hamming(7,4)-coded transmission.
误码率测量，以及未编码与汉明(7,4)编码传输的理论错误概率。
"""

import numpy as np
from scipy.special import erfc
from scipy.stats import binom


def calculate_bit_error_rate(tx_bits, rx_bits):
    """
    Calculate practical bit error rate (BER) / 计算实际误码率

    BER = (Number of bit errors) / (Total number of bits transmitted)
    误码率 = 错误比特数 / 传输总比特数

    Parameters / 参数:
    ----------------
    tx_bits : np.ndarray
        Transmitted bit sequence / 发送比特序列
    rx_bits : np.ndarray
        Received bit sequence / 接收比特序列

    Returns / 返回:
    -------------
    ber : float
        Bit error rate [0, 1] / 误码率，范围[0,1]
    """
    tx_bits = np.asarray(tx_bits)
    rx_bits = np.asarray(rx_bits)

    # Ensure same length / 确保长度一致
    min_length = min(len(tx_bits), len(rx_bits))
    if min_length == 0:
        return 0.0

    errors = np.sum(tx_bits[:min_length] != rx_bits[:min_length])
    return float(errors / min_length)


def ebn0_db_to_linear(ebn0_db):
    """Convert Eb/N0 from decibels to a linear ratio."""
    return 10 ** (np.asarray(ebn0_db, dtype=float) / 10)


def calculate_qpsk_ber(bit_energy, noise_psd):
    """
    Calculate theoretical bit error rate for QPSK / 计算QPSK理论误码率

    QPSK BER formula: Pb = Q(sqrt(2*Eb/N0)) = 0.5 * erfc(sqrt(Eb/N0))
    QPSK误码率公式：Pb = Q(√(2×Eb/N0))

    This is the crossover probability of the equivalent binary symmetric
    channel seen by a hard-decision decoder.
    即硬判决译码器所见等效二进制对称信道的交叉概率。

    Parameters / 参数:
    ----------------
    bit_energy : float
        Energy per bit (Eb) / 每比特能量Eb
    noise_psd : float
        Noise power spectral density (N0) / 噪声功率谱密度N0

    Returns / 返回:
    -------------
    ber : float
        Bit error probability / 误码概率
    """
    if noise_psd <= 0:
        return 0.0
    return float(0.5 * erfc(np.sqrt(bit_energy / noise_psd)))


def calculate_block_error_rate(crossover_probability, block_length=7, correctable=1):
    """
    Probability that a codeword carries more errors than the code corrects
    码字错误数超过纠错能力的概率

    P_block = P(X > t), X ~ Binomial(n, p)

    Parameters / 参数:
    ----------------
    crossover_probability : float
        Channel bit flip probability p / 信道比特翻转概率p
    block_length : int, default=7
        Codeword length n / 码长n
    correctable : int, default=1
        Correctable errors per codeword t / 每码字可纠错数t

    Returns / 返回:
    -------------
    block_error_rate : float
        Decoding failure probability per codeword / 每码字译码失败概率
    """
    return float(binom.sf(correctable, block_length, crossover_probability))
