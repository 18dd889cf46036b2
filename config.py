# config.py

from pathlib import Path

# ----------------------
# 멀티프로세싱 설정
# ----------------------
MAX_WORKERS = 32

# ----------------------
# 경로 설정
# ----------------------
PROJECT_ROOT = Path(__file__).resolve().parent

RESULTS_DIR = PROJECT_ROOT / "results"

# ----------------------
# 샘플 크기 (바이트)
# ----------------------
# 통계(히스토그램/엔트로피/n-gram)용 샘플: 파일 앞부분 2KB
STATS_SAMPLE_SIZE = 2048
# 시그니처 매칭용 헤더 (TAR 'ustar'가 offset 257에 있으므로 512)
HEADER_SAMPLE_SIZE = 512

# ----------------------
# n-gram 설정
# ----------------------
DEFAULT_TOP_M = 50
DEFAULT_NGRAM_SIZES = (2, 3)

# ----------------------
# 분류 임계값
# ----------------------
ENTROPY_BLOCK_SIZE = 256
CONTROL_BYTE_THRESHOLD = 0.10
COMPRESSION_ENTROPY_THRESHOLD = 7.0

TEST_CODECS = ["zstd", "lz4", "snappy"]
