"""
바이트 n-gram 빈도 분석
n 바이트 윈도우를 한 칸씩 밀면서 hex 키로 카운트
"""

from dataclasses import dataclass

from .samples import as_bytes, require_int


@dataclass(frozen=True)
class NGramRecord:
    ngram: str  # 소문자 hex, 바이트당 2자리, 구분자 없음
    count: int

    def to_dict(self) -> dict:
        return {"ngram": self.ngram, "count": self.count}


def ngram_counts(sample, n: int) -> dict:
    """
    전체 n-gram 빈도 테이블 (자르지 않음)
    dict 삽입 순서 = 처음 등장한 offset 순서
    n <= 0 이거나 샘플이 n 보다 짧으면 빈 dict
    """
    n = require_int(n, "n")
    data = as_bytes(sample)
    if n <= 0 or len(data) < n:
        return {}

    counts = {}
    for i in range(len(data) - n + 1):
        key = data[i:i + n].hex()
        counts[key] = counts.get(key, 0) + 1
    return counts


def top_ngrams(sample, n: int, top_m: int = 50):
    """
    빈도 상위 top_m 개 n-gram 반환 (count 내림차순)

    count 가 같으면 처음 등장한 offset 이 빠른 것이 앞에 옴
    (ngram_counts 가 첫 등장 순서를 유지하고 sorted 는 stable sort)
    """
    top_m = require_int(top_m, "top_m")
    counts = ngram_counts(sample, n)
    if top_m <= 0 or not counts:
        return []

    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [NGramRecord(ngram=k, count=c) for k, c in ranked[:top_m]]
