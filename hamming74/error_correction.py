"""
Hamming Error Correction Code (7,4) / 汉明纠错码(7,4)

Stream-level Hamming(7,4) codec: chops bit and byte streams into nibbles and
codewords and runs the nibble codec over each block.
流级汉明(7,4)编解码器：将比特流和字节流切分为半字节与码字，并对每个分组执行半字节编解码。
"""

import numpy as np

from .codec import (CODEWORD_LENGTH, DATA_POSITIONS, NIBBLE_LENGTH,
                    correct_codeword, encode_nibble)
from .converter import NibbleConverter, as_bit_array


class Hamming74:
    """
    Hamming(7,4) Error Correction Code / 汉明(7,4)纠错码

    A linear error-correcting code that encodes 4 data bits into 7 bits
    by adding 3 parity bits. Can detect and correct any single-bit error
    per codeword; two errors in one codeword are silently miscorrected.

    线性纠错码，通过添加3个校验位将4个数据位编码为7位。
    每个码字可检测并纠正任何单比特错误；同一码字内的两个错误会被静默误纠。

    Code parameters / 码参数:
    ----------------------
    - Block length n = 7 / 码长n=7
    - Message bits k = 4 / 信息位k=4
    - Parity bits n-k = 3 / 校验位3
    - Error correction capability: t = 1 / 纠错能力t=1
    - Code rate: R = 4/7 ≈ 0.571 / 码率R=4/7

    The codec holds no state; every call maps its input to a fresh (or the
    caller's ``out``) buffer.
    """

    def __init__(self):
        """
        Initialize Hamming(7,4) codec / 初始化编解码器
        """
        self.n = CODEWORD_LENGTH
        self.k = NIBBLE_LENGTH
        self.converter = NibbleConverter()

    @property
    def code_rate(self):
        return self.k / self.n

    def encode(self, bit_stream, out=None):
        """
        Encode data bits to codewords / 将数据比特编码为码字

        Parameters / 参数:
        ----------------
        bit_stream : array_like (int, 0/1)
            Input data bits (length multiple of 4) / 输入数据比特（长度为4的倍数）
        out : np.ndarray, optional
            Caller-owned output buffer of exactly 7/4 the input length
            调用方提供的输出缓冲区，长度须恰为输入的7/4

        Returns / 返回:
        -------------
        codeword : np.ndarray (uint8, 0/1)
            Encoded codewords (length multiple of 7) / 编码后的码字（长度为7的倍数）
        """
        bit_stream = as_bit_array(bit_stream)
        num_blocks = self._count_blocks(bit_stream, self.k)
        codeword = self._output_buffer(out, num_blocks * self.n)

        for i in range(num_blocks):
            block = bit_stream[i*self.k:(i+1)*self.k]
            codeword[i*self.n:(i+1)*self.n] = encode_nibble(block)

        return codeword

    def decode(self, received_bits, out=None):
        """
        Decode and correct errors / 解码并纠正错误

        Parameters / 参数:
        ----------------
        received_bits : array_like (int, 0/1)
            Received codewords (length multiple of 7) / 接收码字（长度为7的倍数）
        out : np.ndarray, optional
            Caller-owned output buffer of exactly 4/7 the input length
            调用方提供的输出缓冲区，长度须恰为输入的4/7

        Returns / 返回:
        -------------
        decoded_data : np.ndarray (uint8, 0/1)
            Decoded data bits (length multiple of 4) / 解码后的数据比特（长度为4的倍数）
        """
        decoded_data, _ = self.decode_with_syndromes(received_bits, out=out)
        return decoded_data

    def decode_with_syndromes(self, received_bits, out=None):
        """
        Decode and report the syndrome of every codeword / 解码并报告每个码字的伴随式

        A nonzero syndrome means the block was corrected, or miscorrected if
        it carried more than one error.
        伴随式非零表示该分组已被纠正（若含多个错误则为误纠）。

        Returns / 返回:
        -------------
        decoded_data : np.ndarray (uint8, 0/1)
            Decoded data bits / 解码后的数据比特
        syndromes : np.ndarray (int)
            One syndrome per codeword / 每个码字一个伴随式
        """
        received_bits = as_bit_array(received_bits)
        num_blocks = self._count_blocks(received_bits, self.n)
        decoded_data = self._output_buffer(out, num_blocks * self.k)
        syndromes = np.zeros(num_blocks, dtype=int)

        for i in range(num_blocks):
            block = received_bits[i*self.n:(i+1)*self.n]
            corrected, syndromes[i] = correct_codeword(block)
            decoded_data[i*self.k:(i+1)*self.k] = corrected[list(DATA_POSITIONS)]

        return decoded_data, syndromes

    def encode_bytes(self, data, out=None):
        """
        Encode a byte buffer / 编码字节缓冲区

        Every byte yields two codewords: high nibble first, then low nibble.
        每个字节产生两个码字：先高半字节，后低半字节。

        Parameters / 参数:
        ----------------
        data : bytes, bytearray or np.ndarray (uint8)
            Input bytes / 输入字节
        out : np.ndarray, optional
            Output buffer of exactly 14 bits per byte / 每字节恰好14比特的输出缓冲区

        Returns / 返回:
        -------------
        codeword : np.ndarray (uint8, 0/1)
            14 coded bits per input byte / 每个输入字节14个编码比特
        """
        return self.encode(self.converter.split(data), out=out)

    def decode_bytes(self, received_bits):
        """
        Decode codewords back into bytes / 将码字解码回字节

        Parameters / 参数:
        ----------------
        received_bits : array_like (int, 0/1)
            Received codewords (length multiple of 14) / 接收码字（长度为14的倍数）

        Returns / 返回:
        -------------
        data : bytes
            Decoded bytes / 解码后的字节
        """
        received_bits = as_bit_array(received_bits)
        if len(received_bits) % (2 * self.n) != 0:
            raise ValueError(
                'Coded stream of %d bits does not hold a whole number of bytes '
                '(needs a multiple of %d)' % (len(received_bits), 2 * self.n))
        return self.converter.join(self.decode(received_bits))

    def _count_blocks(self, bits, block_size):
        if len(bits) % block_size != 0:
            raise ValueError(
                'Stream of %d bits is not a multiple of the %d-bit block size'
                % (len(bits), block_size))
        return len(bits) // block_size

    def _output_buffer(self, out, size):
        if out is None:
            return np.zeros(size, dtype=np.uint8)
        if not isinstance(out, np.ndarray) or out.ndim != 1:
            raise ValueError('Output buffer must be a 1-D numpy array')
        if len(out) != size:
            raise ValueError(
                'Output buffer holds %d bits, %d required' % (len(out), size))
        return out
