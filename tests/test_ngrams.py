import pytest


def test_ngram_keys_are_lowercase_fixed_width_hex():
    from bytefeatures import top_ngrams

    records = top_ngrams(b"\x0a\xff\x0a\xff", 2)
    assert records[0].ngram == "0aff"
    assert records[0].count == 2
    assert records[0].to_dict() == {"ngram": "0aff", "count": 2}


def test_ngram_table_sum_matches_window_count(random_bytes):
    from bytefeatures import ngram_counts

    for data in (b"", b"a", b"abcabcabc", random_bytes[:300]):
        for n in (1, 2, 3, 5):
            assert sum(ngram_counts(data, n).values()) == max(0, len(data) - n + 1)


def test_short_sample_and_non_positive_n_are_empty():
    from bytefeatures import top_ngrams

    assert top_ngrams(b"ab", 3) == []
    assert top_ngrams(b"abc", 0) == []
    assert top_ngrams(b"abc", -2) == []
    assert top_ngrams(b"abc", 1, top_m=0) == []


def test_ranking_and_first_seen_tie_break():
    from bytefeatures import top_ngrams

    # 'b' 3회, 'c' 2회, 'a' 2회 ('c' 가 먼저 등장)
    records = top_ngrams(b"cbabcab", 1)
    assert [(r.ngram, r.count) for r in records] == [("62", 3), ("63", 2), ("61", 2)]


def test_truncates_to_top_m():
    from bytefeatures import top_ngrams

    data = bytes(range(100))
    assert len(top_ngrams(data, 1, top_m=10)) == 10
    assert len(top_ngrams(data, 1)) == 50


def test_top_ngrams_is_idempotent(random_bytes):
    from bytefeatures import top_ngrams

    first = top_ngrams(random_bytes, 2, top_m=20)
    assert first == top_ngrams(random_bytes, 2, top_m=20)


def test_ngram_rejects_non_integer_length():
    from bytefeatures import InvalidInputError, top_ngrams

    with pytest.raises(InvalidInputError):
        top_ngrams(b"abc", 1.5)
    with pytest.raises(InvalidInputError):
        top_ngrams(b"abc", True)
