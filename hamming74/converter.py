"""
Byte / Bit Stream Converter / 字节-比特流转换器

Handles conversion between byte buffers and the binary bit streams fed to the
Hamming(7,4) codec. Each byte contributes its high nibble first.
处理字节缓冲区与送入汉明(7,4)编解码器的二进制比特流之间的转换。
每个字节先输出高半字节。
"""

import numpy as np


def as_bit_array(bits, length=None):
    """
    Validate and convert a bit sequence / 校验并转换比特序列

    Parameters / 参数:
    ----------------
    bits : array_like (int, 0/1)
        Input bits / 输入比特
    length : int, optional
        Required number of bits / 要求的比特数

    Returns / 返回:
    -------------
    bit_array : np.ndarray (uint8, 0/1)
        1-D bit array / 一维比特数组
    """
    bits = np.asarray(bits)
    if bits.ndim != 1:
        raise ValueError('Expected a 1-D bit sequence, got shape %s' % (bits.shape,))
    if length is not None and len(bits) != length:
        raise ValueError('Expected %d bits, got %d' % (length, len(bits)))
    if bits.size and not np.all((bits == 0) | (bits == 1)):
        raise ValueError('Bit sequence contains values other than 0 and 1')
    return bits.astype(np.uint8)


class NibbleConverter:
    """
    Byte-to-nibble splitter and reassembler / 字节-半字节拆分与重组器

    Bytes are unpacked MSB first, so every group of 4 bits in the output is
    one nibble: bits 7..4 (high nibble) followed by bits 3..0 (low nibble).

    字节按高位在前解包，因此输出中每4比特为一个半字节：
    先为第7..4位（高半字节），后为第3..0位（低半字节）。
    """

    def split(self, data):
        """
        Split bytes into a bit stream / 将字节拆分为比特流

        Parameters / 参数:
        ----------------
        data : bytes, bytearray or np.ndarray (uint8)
            Input bytes / 输入字节

        Returns / 返回:
        -------------
        bit_stream : np.ndarray (uint8, 0/1)
            8 bits per byte, MSB first / 每字节8比特，高位在前
        """
        if isinstance(data, (bytes, bytearray, memoryview)):
            data = np.frombuffer(data, dtype=np.uint8)
        else:
            data = np.asarray(data)
            if data.ndim != 1:
                raise ValueError('Expected a 1-D byte sequence, got shape %s' % (data.shape,))
            if data.size and (np.any(data < 0) or np.any(data > 0xFF)):
                raise ValueError('Byte values must lie in [0, 255]')
            data = data.astype(np.uint8)
        return np.unpackbits(data, bitorder='big')

    def join(self, bit_stream):
        """
        Pack a bit stream back into bytes / 将比特流打包回字节

        Parameters / 参数:
        ----------------
        bit_stream : array_like (int, 0/1)
            Bit stream whose length is a multiple of 8 / 长度为8的倍数的比特流

        Returns / 返回:
        -------------
        data : bytes
            Reassembled bytes / 重组后的字节
        """
        bit_stream = as_bit_array(bit_stream)
        if len(bit_stream) % 8 != 0:
            raise ValueError(
                'Bit stream of %d bits does not split into whole bytes' % len(bit_stream))
        return np.packbits(bit_stream, bitorder='big').tobytes()
