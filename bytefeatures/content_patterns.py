"""
샘플 내용 분류
printable 비율 / null / 제어문자 / 엔트로피 + 시그니처 결과를 합쳐서
text vs binary, 압축 의심 여부, 선언 타입 일치 신뢰도 계산
"""

from dataclasses import dataclass, asdict
from typing import Optional

import numpy as np

from config import (
    HEADER_SAMPLE_SIZE,
    CONTROL_BYTE_THRESHOLD,
    COMPRESSION_ENTROPY_THRESHOLD,
)

from .samples import as_uint8_array
from .signatures import identify_file_type
from .statistical import byte_histogram, shannon_entropy

# 0x09(tab), 0x0A(LF), 0x0D(CR)
WHITESPACE_CONTROLS = [9, 10, 13]
O_SPACE, O_TILDE = ord(" "), ord("~")


@dataclass(frozen=True)
class ContentClassification:
    is_binary: bool
    entropy: float
    printable_ratio: float
    null_byte_count: int
    compression_likely: bool
    detected_type: str
    matches_declared: bool
    confidence: str

    def to_dict(self) -> dict:
        return asdict(self)


# =========================================
# 1. 히스토그램 기반 카운트
# =========================================
def printable_count(counts: np.ndarray) -> int:
    return int(counts[O_SPACE:O_TILDE + 1].sum() + counts[WHITESPACE_CONTROLS].sum())


def control_count(counts: np.ndarray) -> int:
    """0~31 중 tab/LF/CR 제외."""
    return int(counts[:32].sum() - counts[WHITESPACE_CONTROLS].sum())


def printable_ratio(counts: np.ndarray, length: int) -> float:
    # 빈 샘플은 trivially printable
    if length == 0:
        return 1.0
    return printable_count(counts) / float(length)


# =========================================
# 2. 판정 규칙 (순서대로 적용)
# =========================================
def is_binary(counts: np.ndarray, length: int, threshold: float = CONTROL_BYTE_THRESHOLD) -> bool:
    if counts[0] > 0:
        return True
    if length == 0:
        return False
    return control_count(counts) / float(length) > threshold


def is_compression_likely(entropy: float, sample_size: int, file_size: Optional[int],
                          threshold: float = COMPRESSION_ENTROPY_THRESHOLD) -> bool:
    """잘린 샘플인데 엔트로피가 거의 최대 → 뒤쪽도 압축/암호화 데이터일 가능성."""
    if file_size is None:
        return False
    return entropy > threshold and sample_size < file_size


def matches_declared(detected_type: str, declared_type: Optional[str]) -> bool:
    if not declared_type:
        return False
    detected = detected_type.lower()
    declared = declared_type.lower()
    return detected in declared or declared in detected


def signature_confidence(detected_type: str, declared_type: Optional[str]) -> str:
    if detected_type == "Unknown":
        return "low"
    if declared_type and detected_type.lower() in declared_type.lower():
        return "high"
    return "medium"


def classify(
    sample,
    declared_type: Optional[str] = None,
    file_size: Optional[int] = None,
    header_size: int = HEADER_SAMPLE_SIZE,
    control_threshold: float = CONTROL_BYTE_THRESHOLD,
    entropy_threshold: float = COMPRESSION_ENTROPY_THRESHOLD,
) -> ContentClassification:
    """
    샘플 하나를 분류
    file_size 가 None 이면 샘플 = 파일 전체로 보고 compression_likely 는 False
    """
    arr = as_uint8_array(sample)
    length = int(arr.size)
    counts = byte_histogram(arr)
    entropy = shannon_entropy(counts, length)

    detected = identify_file_type(arr[:header_size])

    return ContentClassification(
        is_binary=is_binary(counts, length, control_threshold),
        entropy=entropy,
        printable_ratio=printable_ratio(counts, length),
        null_byte_count=int(counts[0]),
        compression_likely=is_compression_likely(entropy, length, file_size, entropy_threshold),
        detected_type=detected,
        matches_declared=matches_declared(detected, declared_type),
        confidence=signature_confidence(detected, declared_type),
    )


# =========================================
# 3. 사람이 읽는 해석 라벨
# =========================================
def entropy_label(entropy: float) -> str:
    if entropy < 1:
        return "Very low (likely empty or very repetitive)"
    if entropy < 3:
        return "Low (highly structured/compressed)"
    if entropy < 5:
        return "Medium (normal text/code)"
    if entropy < 7:
        return "High (mixed content)"
    return "Very high (encrypted/compressed/random)"


def randomness_score(entropy: float) -> float:
    """엔트로피를 0~100 % 로 환산."""
    return entropy / 8.0 * 100.0


def estimate_compression(sample) -> str:
    """서로 다른 바이트 값 개수 / 256 으로 압축 여지 대략 추정."""
    arr = as_uint8_array(sample)
    ratio = np.unique(arr).size / 256.0

    if ratio < 0.1:
        return "Very high"
    if ratio < 0.3:
        return "High"
    if ratio < 0.6:
        return "Medium"
    return "Low"


def interpret_byte_patterns(patterns: dict, sample_size: int, entropy: float):
    """byte_pattern_stats 결과를 설명 문장 리스트로."""
    if sample_size == 0:
        return ["Empty sample"]

    null_pct = patterns["null_bytes"] / sample_size * 100.0
    repeating_pct = patterns["repeating_bytes"] / sample_size * 100.0
    randomness = randomness_score(entropy)

    notes = []
    if null_pct > 50:
        notes.append("High null byte content - possible sparse file or padding")
    if repeating_pct > 30:
        notes.append("High repetition - possible compressed or structured data")
    if randomness > 85:
        notes.append("Very high randomness - possible encrypted or compressed data")
    elif randomness < 15:
        notes.append("Low randomness - highly structured or simple data")

    return notes or ["Normal binary patterns detected"]
