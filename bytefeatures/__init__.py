"""
bytefeatures 패키지
바이트 샘플 통계/시그니처/분류 관련 모듈들
"""

from .samples import InvalidInputError, as_uint8_array, as_bytes
from .statistical import (
    byte_histogram,
    shannon_entropy,
    sample_entropy,
    block_entropy,
    summarize_block_entropy,
    byte_pattern_stats,
)
from .ngrams import NGramRecord, ngram_counts, top_ngrams
from .signatures import SIGNATURES, SignatureEntry, identify_file_type, signature_hex
from .content_patterns import (
    ContentClassification,
    classify,
    entropy_label,
    randomness_score,
    estimate_compression,
    interpret_byte_patterns,
)
from .compression import measure_compressibility

__all__ = [
    'InvalidInputError',
    'as_uint8_array',
    'as_bytes',
    'byte_histogram',
    'shannon_entropy',
    'sample_entropy',
    'block_entropy',
    'summarize_block_entropy',
    'byte_pattern_stats',
    'NGramRecord',
    'ngram_counts',
    'top_ngrams',
    'SIGNATURES',
    'SignatureEntry',
    'identify_file_type',
    'signature_hex',
    'ContentClassification',
    'classify',
    'entropy_label',
    'randomness_score',
    'estimate_compression',
    'interpret_byte_patterns',
    'measure_compressibility',
]
