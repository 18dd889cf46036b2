"""
실측 압축률 프로브
LZ4, Snappy, ZSTD 로 샘플을 실제로 압축해 보고 압축률/시간 측정
(이미 압축/암호화된 데이터는 거의 줄어들지 않음)
"""

import time
import lz4.frame
import snappy
import zstandard as zstd

from .samples import InvalidInputError, as_bytes

_zstd_cctx = zstd.ZstdCompressor(level=3)


def _measure(compress, data: bytes):
    """
    압축 수행 및 성능 측정
    ratio = 압축 크기 / 원본 크기 (빈 입력은 1.0)
    """
    if not data:
        return 1.0, 0.0

    t0 = time.perf_counter_ns()
    compressed = compress(data)
    t1 = time.perf_counter_ns()

    time_ms = (t1 - t0) / 1e6
    ratio = len(compressed) / len(data)
    return ratio, time_ms


def compress_with_zstd(data: bytes):
    return _measure(_zstd_cctx.compress, data)


def compress_with_lz4(data: bytes):
    return _measure(lz4.frame.compress, data)


def compress_with_snappy(data: bytes):
    return _measure(snappy.compress, data)


CODEC_FUNCS = {
    "zstd": compress_with_zstd,
    "lz4": compress_with_lz4,
    "snappy": compress_with_snappy,
}


def measure_compressibility(sample, codecs=("zstd", "lz4", "snappy")) -> dict:
    """
    코덱별 {codec}_ratio, {codec}_time_ms 와
    ratio 가 가장 작은 코덱 이름(best_ratio_codec) 반환
    """
    data = as_bytes(sample)

    result = {}
    ratios = {}
    for codec in codecs:
        if codec not in CODEC_FUNCS:
            raise InvalidInputError(f"unknown codec: {codec!r} (expected one of {sorted(CODEC_FUNCS)})")
        ratio, time_ms = CODEC_FUNCS[codec](data)
        result[f"{codec}_ratio"] = ratio
        result[f"{codec}_time_ms"] = time_ms
        ratios[codec] = ratio

    result["best_ratio_codec"] = min(ratios, key=ratios.get) if ratios else None
    return result
