import json

import pytest


def test_analyze_sample_text():
    from triage import analyze_sample

    report = analyze_sample(b"hello world\n", declared_type="text/plain", ngram_sizes=(1, 2), top_m=5)

    assert report.sample_size == 12
    assert int(report.histogram.sum()) == 12
    assert report.detected_type == "Text"
    assert report.classification.confidence == "high"
    assert report.entropy == report.classification.entropy
    assert set(report.ngrams) == {1, 2}
    assert report.ngrams[1][0].ngram == "6c"  # 'l' 3회
    assert len(report.ngrams[2]) == 5
    assert report.signature.startswith("68 65 6c 6c")


def test_analyze_sample_report_is_json_serializable(random_bytes):
    from triage import analyze_sample

    report = analyze_sample(random_bytes, file_size=1 << 20)
    data = json.loads(json.dumps(report.to_dict()))

    assert len(data["histogram"]) == 256
    assert sum(data["histogram"]) == len(random_bytes)
    assert set(data["ngrams"]) == {"2", "3"}
    assert data["classification"]["compression_likely"] is True
    assert data["classification"]["detected_type"] == "Unknown"
    assert data["entropy_label"].startswith("Very high")
    assert len(data["block_entropy"]) == 8


def test_analyze_sample_without_compression_probe():
    from triage import analyze_sample

    report = analyze_sample(b"\x00" * 64, include_compression=False)
    assert report.compressibility == {}
    assert report.classification.is_binary is True


def test_analyze_file_uses_prefix_and_file_size(tmp_path, random_bytes):
    from triage import analyze_file

    path = tmp_path / "photo.jpg"
    path.write_bytes(bytes.fromhex("FFD8FFE0") + random_bytes * 4)

    report = analyze_file(path, sample_size=1024)
    assert report.sample_size == 1024
    assert report.file_size == 4 + 4 * len(random_bytes)
    assert report.declared_type == "image/jpeg"
    assert report.detected_type == "JPEG"
    assert report.classification.confidence == "high"
    assert report.classification.matches_declared is True


def test_analyze_file_missing(tmp_path):
    from triage import analyze_file

    with pytest.raises(FileNotFoundError):
        analyze_file(tmp_path / "nope.bin")


def test_declared_type_for(tmp_path):
    from triage.common import declared_type_for

    assert declared_type_for(tmp_path / "notes.txt") == "text/plain"
    assert declared_type_for(tmp_path / "archive.zzqx") == "zzqx"
    assert declared_type_for(tmp_path / "README") is None


def test_to_row_flattens_summary():
    from triage import analyze_sample

    row = analyze_sample(b"abababab", ngram_sizes=(2,)).to_row()
    assert row["top_2gram"] == "6162"
    assert row["top_2gram_count"] == 4
    assert row["detected_type"] == "Text"
    assert "histogram" not in row


def test_negative_sample_size_is_rejected(tmp_path):
    from bytefeatures import InvalidInputError
    from triage import analyze_file
    from triage.common import read_sample

    path = tmp_path / "blob.bin"
    path.write_bytes(b"\xab" * 5000)

    with pytest.raises(InvalidInputError):
        read_sample(path, -1)
    with pytest.raises(InvalidInputError):
        analyze_file(path, sample_size=-1)

    assert read_sample(path, 0) == b""
    assert analyze_file(path, sample_size=100, include_compression=False).sample_size == 100
