# triage/report.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from config import (
    STATS_SAMPLE_SIZE,
    HEADER_SAMPLE_SIZE,
    DEFAULT_TOP_M,
    DEFAULT_NGRAM_SIZES,
    ENTROPY_BLOCK_SIZE,
    CONTROL_BYTE_THRESHOLD,
    COMPRESSION_ENTROPY_THRESHOLD,
    TEST_CODECS,
)
from bytefeatures import (
    ContentClassification,
    NGramRecord,
    as_uint8_array,
    block_entropy,
    byte_histogram,
    byte_pattern_stats,
    classify,
    entropy_label,
    estimate_compression,
    interpret_byte_patterns,
    measure_compressibility,
    randomness_score,
    signature_hex,
    summarize_block_entropy,
    top_ngrams,
)

from .common import declared_type_for, read_sample


@dataclass(frozen=True)
class AnalysisReport:
    """
    샘플 하나에 대한 분석 결과 묶음 (호출마다 새로 생성)
    """
    sample_size: int
    file_size: Optional[int]
    declared_type: Optional[str]
    histogram: np.ndarray = field(compare=False, repr=False)
    ngrams: Dict[int, List[NGramRecord]]
    signature: str
    classification: ContentClassification
    entropy_label: str
    randomness_score: float
    compression_estimate: str
    compressibility: Dict
    block_entropy: List[Dict] = field(repr=False)
    block_summary: Dict
    byte_patterns: Dict
    pattern_notes: List[str]

    @property
    def entropy(self) -> float:
        return self.classification.entropy

    @property
    def detected_type(self) -> str:
        return self.classification.detected_type

    def to_dict(self) -> dict:
        """JSON 직렬화 가능한 dict (histogram 은 256개 int 리스트, n-gram 키는 str(n))."""
        return {
            "sample_size": self.sample_size,
            "file_size": self.file_size,
            "declared_type": self.declared_type,
            "histogram": [int(c) for c in self.histogram],
            "ngrams": {
                str(n): [r.to_dict() for r in records]
                for n, records in self.ngrams.items()
            },
            "signature": self.signature,
            "classification": self.classification.to_dict(),
            "entropy_label": self.entropy_label,
            "randomness_score": self.randomness_score,
            "compression_estimate": self.compression_estimate,
            "compressibility": dict(self.compressibility),
            "block_entropy": list(self.block_entropy),
            "block_summary": dict(self.block_summary),
            "byte_patterns": dict(self.byte_patterns),
            "pattern_notes": list(self.pattern_notes),
        }

    def to_row(self) -> dict:
        """
        배치 CSV 용 1행 요약
        - histogram / block_entropy 같은 큰 필드는 제외
        - n-gram 은 n 별 최상위 1개만
        """
        row = {
            "sample_size": self.sample_size,
            "file_size": self.file_size,
            "declared_type": self.declared_type,
            "signature": self.signature,
            **self.classification.to_dict(),
            "entropy_label": self.entropy_label,
            "randomness_score": self.randomness_score,
            "compression_estimate": self.compression_estimate,
            **self.compressibility,
            "high_entropy_pct": self.block_summary["high_entropy_pct"],
            "low_entropy_pct": self.block_summary["low_entropy_pct"],
            **self.byte_patterns,
        }
        for n, records in self.ngrams.items():
            row[f"top_{n}gram"] = records[0].ngram if records else None
            row[f"top_{n}gram_count"] = records[0].count if records else 0
        return row


# =========================
# 단일 샘플 분석
# =========================

def analyze_sample(
    sample,
    declared_type: Optional[str] = None,
    file_size: Optional[int] = None,
    ngram_sizes=DEFAULT_NGRAM_SIZES,
    top_m: int = DEFAULT_TOP_M,
    include_compression: bool = True,
) -> AnalysisReport:
    """
    바이트 샘플 하나에 대해
      1) 히스토그램 + 엔트로피 + 분류 (content_patterns.classify)
      2) n 별 상위 n-gram
      3) 블록 엔트로피 / 바이트 패턴 / 압축 추정
    까지 묶어서 AnalysisReport 로 반환
    """
    arr = as_uint8_array(sample)
    length = int(arr.size)

    classification = classify(
        arr,
        declared_type=declared_type,
        file_size=file_size,
        header_size=HEADER_SAMPLE_SIZE,
        control_threshold=CONTROL_BYTE_THRESHOLD,
        entropy_threshold=COMPRESSION_ENTROPY_THRESHOLD,
    )
    entropy = classification.entropy

    blocks = block_entropy(arr, ENTROPY_BLOCK_SIZE)
    patterns = byte_pattern_stats(arr)

    compressibility = {}
    if include_compression:
        compressibility = measure_compressibility(arr, codecs=TEST_CODECS)

    return AnalysisReport(
        sample_size=length,
        file_size=file_size,
        declared_type=declared_type,
        histogram=byte_histogram(arr),
        ngrams={n: top_ngrams(arr, n, top_m) for n in ngram_sizes},
        signature=signature_hex(arr[:HEADER_SAMPLE_SIZE]),
        classification=classification,
        entropy_label=entropy_label(entropy),
        randomness_score=randomness_score(entropy),
        compression_estimate=estimate_compression(arr),
        compressibility=compressibility,
        block_entropy=blocks,
        block_summary=summarize_block_entropy(blocks),
        byte_patterns=patterns,
        pattern_notes=interpret_byte_patterns(patterns, length, entropy),
    )


# =========================
# 파일 분석
# =========================

def analyze_file(
    path: Path,
    sample_size: int = STATS_SAMPLE_SIZE,
    declared_type: Optional[str] = None,
    **kwargs,
) -> AnalysisReport:
    """
    파일 앞부분 sample_size 바이트만 읽어서 분석
    declared_type 을 안 주면 파일 이름(MIME/확장자)에서 추정
    """
    path = Path(path)
    data = read_sample(path, sample_size)
    file_size = path.stat().st_size

    if declared_type is None:
        declared_type = declared_type_for(path)

    return analyze_sample(data, declared_type=declared_type, file_size=file_size, **kwargs)
