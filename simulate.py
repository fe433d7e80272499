"""
Hamming(7,4) Channel Coding Simulation / 汉明(7,4)信道编码仿真

Transmission chain from byte source to sink over a binary symmetric channel,
with and without Hamming(7,4) forward error correction.
经二进制对称信道从字节信源到信宿的传输链路，对比有无汉明(7,4)前向纠错。
"""

import numpy as np
import time
import matplotlib.pyplot as plt
from PIL import Image
from typing import Dict, Any, Iterable, Optional, Tuple
import os

from hamming74 import (BinarySymmetricChannel, Hamming74, NibbleConverter,
                       calculate_bit_error_rate, calculate_block_error_rate,
                       calculate_qpsk_ber, ebn0_db_to_linear)

plt.rcParams['font.sans-serif'] = ['SimHei', 'DejaVu Sans']
plt.rcParams['axes.unicode_minus'] = False


# ==========================================
# Main Simulation Functions / 主仿真函数
# ==========================================

def simulate_transmission(data: bytes, crossover_probability: float,
                          enable_error_correction: bool = True,
                          seed: Optional[int] = None) -> Tuple[bytes, Dict[str, Any]]:
    """
    Byte Transmission Simulation / 字节传输仿真

    Simulates complete chain: Bytes → Bits → (Hamming encode) →
    BSC → (Hamming decode) → Bytes.

    仿真完整链路：字节 → 比特 → （汉明编码） → BSC → （汉明译码） → 字节。
    """
    converter = NibbleConverter()
    channel = BinarySymmetricChannel(crossover_probability, seed=seed)
    hamming: Optional[Hamming74] = Hamming74() if enable_error_correction else None

    source_bits = converter.split(data)

    # 1. 信道编码
    if hamming is not None:
        transmitted_bits = hamming.encode_bytes(data)
    else:
        transmitted_bits = source_bits

    # 2. 信道
    received_bits = channel.simulate(transmitted_bits)
    ber_before_correction = calculate_bit_error_rate(transmitted_bits, received_bits)

    # 3. 信道译码
    corrected_blocks = 0
    if hamming is not None:
        decoded_bits, syndromes = hamming.decode_with_syndromes(received_bits)
        corrected_blocks = int(np.count_nonzero(syndromes))
    else:
        decoded_bits = received_bits

    received_data = converter.join(decoded_bits)

    metrics = {
        'ber_before_correction': ber_before_correction,
        'ber_after_correction': calculate_bit_error_rate(source_bits, decoded_bits),
        'byte_errors': sum(a != b for a, b in zip(data, received_data)),
        'corrected_blocks': corrected_blocks,
        'code_rate': hamming.code_rate if hamming is not None else 1.0,
        'transmitted_bits': len(transmitted_bits),
        'enable_fec': enable_error_correction
    }

    return received_data, metrics


def run_ber_sweep(ebn0_db_values: Iterable[float], num_bytes: int = 4096,
                  seed: Optional[int] = None, plot: bool = True) -> Dict[str, np.ndarray]:
    """
    BER versus Eb/N0 sweep / 误码率随Eb/N0变化的扫描

    The coded curve accounts for the rate loss: each coded bit only carries
    4/7 of the information bit energy.
    编码曲线计入码率损失：每个编码比特只携带信息比特能量的4/7。
    """
    ebn0_db_values = np.asarray(list(ebn0_db_values), dtype=float)
    rng = np.random.default_rng(seed)
    data = rng.integers(0, 256, size=num_bytes, dtype=np.uint8).tobytes()
    code_rate = Hamming74().code_rate

    ber_uncoded = np.zeros(len(ebn0_db_values))
    ber_coded = np.zeros(len(ebn0_db_values))
    ber_uncoded_theory = np.zeros(len(ebn0_db_values))
    block_error_theory = np.zeros(len(ebn0_db_values))

    print(f"\n  {'Eb/N0 (dB)':>10} {'p uncoded':>12} {'BER uncoded':>12} {'BER coded':>12} {'P_block':>12}")
    print(f"  {'-'*10} {'-'*12} {'-'*12} {'-'*12} {'-'*12}")

    for i, ebn0 in enumerate(ebn0_db_values):
        ebn0_linear = float(ebn0_db_to_linear(ebn0))
        p_uncoded = calculate_qpsk_ber(ebn0_linear, 1.0)
        p_coded = calculate_qpsk_ber(ebn0_linear * code_rate, 1.0)

        case_seed = None if seed is None else seed + i
        _, metrics_no_fec = simulate_transmission(data, p_uncoded, False, case_seed)
        _, metrics_fec = simulate_transmission(data, p_coded, True, case_seed)

        ber_uncoded_theory[i] = p_uncoded
        ber_uncoded[i] = metrics_no_fec['ber_after_correction']
        ber_coded[i] = metrics_fec['ber_after_correction']
        block_error_theory[i] = calculate_block_error_rate(p_coded)

        print(f"  {ebn0:>10.1f} {p_uncoded:>12.2e} {ber_uncoded[i]:>12.2e} "
              f"{ber_coded[i]:>12.2e} {block_error_theory[i]:>12.2e}")

    results = {
        'ebn0_db': ebn0_db_values,
        'ber_uncoded': ber_uncoded,
        'ber_coded': ber_coded,
        'ber_uncoded_theory': ber_uncoded_theory,
        'block_error_theory': block_error_theory
    }

    if plot:
        os.makedirs("generated", exist_ok=True)
        fig, ax = plt.subplots(figsize=(8, 5))
        ax.semilogy(ebn0_db_values, ber_uncoded_theory, 'k--', label="Uncoded (theory) / 未编码（理论）")
        ax.semilogy(ebn0_db_values, np.maximum(ber_uncoded, 1e-7), 'ro-', label="Uncoded / 未编码")
        ax.semilogy(ebn0_db_values, np.maximum(ber_coded, 1e-7), 'bs-', label="Hamming(7,4) / 汉明(7,4)")
        ax.set_xlabel("Eb/N0 (dB)")
        ax.set_ylabel("BER / 误码率")
        ax.set_title("Hard-decision QPSK over AWGN / AWGN信道硬判决QPSK")
        ax.grid(True, which='both', alpha=0.3)
        ax.legend()
        plt.tight_layout()
        curve_filename = "generated/ber_curve.png"
        plt.savefig(curve_filename, dpi=150, bbox_inches='tight')
        plt.close()
        print(f"  Saved BER curve / 保存误码率曲线: {curve_filename}")

    return results


def process_image_transmission(crossover_probability: float,
                               image_path: str = "test_images/lena_color.tif",
                               seed: Optional[int] = None) -> None:
    """
    Process image transmission over a BSC / 经二进制对称信道传输图像
    """

    print(f"\n{'='*60}")
    print(f"Processing / 处理中: p={crossover_probability}")
    print(f"{'='*60}")

    # 加载图像
    try:
        if not os.path.exists(image_path):
            print(f"Warning / 警告: {image_path} not found, creating test pattern...")
            size = 256
            x = np.linspace(0, 255, size)
            y = np.linspace(0, 255, size)
            X, Y = np.meshgrid(x, y)
            R = (X + Y) % 256
            G = (X * 2) % 256
            B = (Y * 2) % 256
            image_array = np.stack([R, G, B], axis=2).astype(np.uint8)
            image_original = Image.fromarray(image_array)
        else:
            image_original = Image.open(image_path)
            image_array = np.array(image_original)
    except OSError as e:
        print(f"Error loading image / 加载图像错误: {e}")
        return

    image_shape = image_array.shape
    print(f"Image shape / 图像尺寸: {image_shape}")

    payload = image_array.astype(np.uint8).tobytes()

    # ==========================================
    # 带纠错仿真 (Simulation WITH FEC)
    # ==========================================
    print("Running simulation WITH Hamming(7,4) FEC / 运行带汉明纠错仿真...")
    start_time = time.time()
    data_fec, metrics_fec = simulate_transmission(
        payload, crossover_probability, enable_error_correction=True, seed=seed)
    print(f"  Completed in / 耗时: {time.time() - start_time:.2f} seconds / 秒")

    # ==========================================
    # 无纠错仿真 (Simulation WITHOUT FEC)
    # ==========================================
    print("Running simulation WITHOUT FEC / 运行无纠错仿真...")
    start_time = time.time()
    data_no_fec, metrics_no_fec = simulate_transmission(
        payload, crossover_probability, enable_error_correction=False, seed=seed)
    print(f"  Completed in / 耗时: {time.time() - start_time:.2f} seconds / 秒")

    # ==========================================
    # 重建图像 (Image Reconstruction)
    # ==========================================
    image_fec = Image.fromarray(np.frombuffer(data_fec, dtype=np.uint8).reshape(image_shape))
    image_no_fec = Image.fromarray(np.frombuffer(data_no_fec, dtype=np.uint8).reshape(image_shape))

    os.makedirs("generated", exist_ok=True)
    fec_filename = f"generated/image_with_fec_P{crossover_probability}.png"
    no_fec_filename = f"generated/image_no_fec_P{crossover_probability}.png"
    image_fec.save(fec_filename)
    image_no_fec.save(no_fec_filename)
    print(f"  Saved / 已保存: {fec_filename}")
    print(f"  Saved / 已保存: {no_fec_filename}")

    # ==========================================
    # 可视化 (Visualization)
    # ==========================================
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    fig.suptitle(f"Image Transmission over BSC: p={crossover_probability}",
                 fontsize=14, fontweight='bold')

    axes[0].imshow(image_original)
    axes[0].set_title("Original / 原始图像")
    axes[0].axis('off')

    axes[1].imshow(image_fec)
    axes[1].set_title(f"With FEC / 带纠错\nBER: {metrics_fec['ber_after_correction']:.2e}")
    axes[1].axis('off')

    axes[2].imshow(image_no_fec)
    axes[2].set_title(f"Without FEC / 无纠错\nBER: {metrics_no_fec['ber_after_correction']:.2e}")
    axes[2].axis('off')

    plt.tight_layout()
    comparison_filename = f"generated/comparison_P{crossover_probability}.png"
    plt.savefig(comparison_filename, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"  Saved comparison / 保存对比图: {comparison_filename}")

    # ==========================================
    # 性能报告 (Performance Report)
    # ==========================================
    print(f"\nMetrics Summary / 性能指标摘要:")
    print(f"  {'Parameter':<35} {'With FEC':>15} {'Without FEC':>15}")
    print(f"  {'-'*35} {'-'*15} {'-'*15}")
    print(f"  {'Channel BER':<35} {metrics_fec['ber_before_correction']:>15.2e} {metrics_no_fec['ber_before_correction']:>15.2e}")
    print(f"  {'Delivered BER':<35} {metrics_fec['ber_after_correction']:>15.2e} {metrics_no_fec['ber_after_correction']:>15.2e}")
    print(f"  {'Byte errors':<35} {metrics_fec['byte_errors']:>15d} {metrics_no_fec['byte_errors']:>15d}")
    print(f"  {'Corrected codewords':<35} {metrics_fec['corrected_blocks']:>15d} {'N/A':>15}")
    print(f"  {'Transmitted bits':<35} {metrics_fec['transmitted_bits']:>15d} {metrics_no_fec['transmitted_bits']:>15d}")


if __name__ == "__main__":
    os.makedirs("generated", exist_ok=True)
    os.makedirs("test_images", exist_ok=True)

    print("Hamming(7,4) Channel Coding Simulation / 汉明(7,4)信道编码仿真")
    print("=" * 60)
    print("Transmission chain: Source → Hamming(7,4) → BSC → Decoder → Sink")
    print("传输链路：信源 → 汉明(7,4)编码 → 二进制对称信道 → 译码 → 信宿")

    run_ber_sweep(np.arange(0.0, 9.0, 1.0), seed=2024)

    # 不同交叉概率的图像传输
    test_cases = [
        0.001,  # 低误码
        0.01,   # 中误码
        0.05,   # 高误码
    ]

    for p in test_cases:
        try:
            process_image_transmission(crossover_probability=p, seed=7)
        except ValueError as e:
            print(f"Error in case (p={p}): {e}")
            import traceback
            traceback.print_exc()

    print("\n" + "="*60)
    print("Simulation completed / 仿真完成")
