import math

import numpy as np

from .samples import InvalidInputError, as_uint8_array


# =========================================
# 1. Byte histogram
# =========================================
def byte_histogram(sample) -> np.ndarray:
    """
    0~255 각 값이 몇 번 나왔는지 카운트 (256칸 고정, 없는 값은 0)
    빈 입력이면 전부 0인 히스토그램 반환
    """
    arr = as_uint8_array(sample)
    return np.bincount(arr, minlength=256).astype(np.int64)


# =========================================
# 2. Shannon Entropy (bits per byte)
# =========================================
def shannon_entropy(histogram, total_bytes: int) -> float:
    """
    히스토그램 + 전체 바이트 수로 샤논 엔트로피 계산
    - 값이 높을수록 (최대 8.0): 데이터가 무작위적 (압축/암호화 가능성)
    - 값이 낮을수록 (최소 0.0): 데이터가 반복적
    total_bytes == 0 이면 0.0 (에러 아님)

    수치만 계산하고 "암호화 의심" 같은 해석은 content_patterns 쪽 책임.
    """
    counts = np.asarray(histogram, dtype=np.int64)
    if counts.shape != (256,):
        raise InvalidInputError(f"histogram must have 256 bins, got shape {counts.shape}")
    if (counts < 0).any():
        raise InvalidInputError("histogram counts must be non-negative")

    if total_bytes <= 0:
        return 0.0

    probs = counts[counts > 0] / float(total_bytes)
    ent = -float((probs * np.log2(probs)).sum())
    # 단일 값만 있으면 -0.0 이 나오므로 정리
    return ent if ent > 0.0 else 0.0


def sample_entropy(sample) -> float:
    """샘플 → 히스토그램 → 엔트로피 한 번에."""
    arr = as_uint8_array(sample)
    return shannon_entropy(byte_histogram(arr), int(arr.size))


# =========================================
# 3. 블록 단위 엔트로피 맵
# =========================================
def block_entropy(sample, block_size: int = 256):
    """
    샘플을 block_size 단위로 잘라서 블록별 엔트로피 계산 (마지막 블록은 짧을 수 있음)

    반환: [{'offset': int, 'size': int, 'entropy': float, 'normalized': float}, ...]
    """
    if block_size <= 0:
        raise InvalidInputError(f"block_size must be positive, got {block_size}")

    arr = as_uint8_array(sample)
    blocks = []
    for offset in range(0, int(arr.size), block_size):
        block = arr[offset:offset + block_size]
        ent = shannon_entropy(np.bincount(block, minlength=256), int(block.size))
        blocks.append({
            "offset": offset,
            "size": int(block.size),
            "entropy": ent,
            "normalized": ent / 8.0,
        })
    return blocks


def summarize_block_entropy(blocks) -> dict:
    """
    블록 엔트로피 분포 요약
    - high: normalized > 0.85, low: normalized < 0.3 (퍼센트)
    - suspicious_regions: normalized > 0.9 인 블록 (암호화/압축 구간 후보)
    """
    total = len(blocks)
    if total == 0:
        return {
            "high_entropy_pct": 0.0,
            "low_entropy_pct": 0.0,
            "suspicious_regions": [],
        }

    high = sum(1 for b in blocks if b["normalized"] > 0.85)
    low = sum(1 for b in blocks if b["normalized"] < 0.3)

    return {
        "high_entropy_pct": high / total * 100.0,
        "low_entropy_pct": low / total * 100.0,
        "suspicious_regions": [
            {"offset": b["offset"], "entropy": b["entropy"]}
            for b in blocks if b["normalized"] > 0.9
        ],
    }


# =========================================
# 4. 바이트 패턴 통계 (null / 반복 / 연속 / run-length)
# =========================================
def byte_pattern_stats(sample) -> dict:
    """
    - null_bytes: 0x00 개수
    - repeating_bytes: 바로 앞 바이트와 같은 바이트 수
    - sequential_bytes: 바로 앞 바이트 + 1 인 바이트 수
    - num_runs / run_mean / run_std: 연속된 동일 바이트 구간(run) 통계
    """
    arr = as_uint8_array(sample)
    length = int(arr.size)
    if length == 0:
        return {
            "null_bytes": 0,
            "repeating_bytes": 0,
            "sequential_bytes": 0,
            "num_runs": 0,
            "run_mean": 0.0,
            "run_std": 0.0,
        }

    wide = arr.astype(np.int16)
    diff = wide[1:] - wide[:-1]
    repeating = int((diff == 0).sum())

    # run 경계 = 값이 바뀌는 위치
    boundaries = np.flatnonzero(diff != 0) + 1
    edges = np.concatenate(([0], boundaries, [length]))
    runs = np.diff(edges)

    num_runs = int(runs.size)
    mean = float(runs.mean())
    var = float((runs.astype(np.float64) ** 2).mean()) - mean * mean
    if var < 0.0:  # 부동소수점 오차 방어
        var = 0.0

    return {
        "null_bytes": int((arr == 0).sum()),
        "repeating_bytes": repeating,
        "sequential_bytes": int((diff == 1).sum()),
        "num_runs": num_runs,
        "run_mean": mean,
        "run_std": math.sqrt(var),
    }
