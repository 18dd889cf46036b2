import pytest


def test_jpeg_and_png():
    from bytefeatures import identify_file_type

    assert "JPEG" in identify_file_type(bytes.fromhex("FFD8FFE000104A464946"))
    assert "PNG" in identify_file_type(bytes.fromhex("89504E470D0A1A0A0000000D"))


def test_ascii_signatures():
    from bytefeatures import identify_file_type

    assert identify_file_type(b"%PDF-1.7\n") == "PDF"
    assert identify_file_type(b"PK\x03\x04\x14\x00") == "ZIP/Office"
    assert identify_file_type(b"RIFF\x24\x00\x00\x00WAVE") == "WAV/AVI"
    assert identify_file_type(b"OggS\x00\x02") == "OGG"
    assert identify_file_type(b"ID3\x03\x00") == "MP3"


def test_offset_signatures():
    from bytefeatures import identify_file_type

    mp4 = b"\x00\x00\x00\x20ftypisom\x00\x00\x02\x00"
    assert identify_file_type(mp4) == "MP4/MOV"

    tar = b"notes.txt".ljust(257, b"\x00") + b"ustar\x0000"
    assert identify_file_type(tar) == "TAR"


def test_table_order_wins_over_later_entries():
    from bytefeatures import SIGNATURES, identify_file_type

    labels = [entry.label for entry in SIGNATURES]
    assert labels.index("JPEG") < labels.index("PNG") < labels.index("ZIP/Office")
    # ZIP/Office (2바이트) 가 더 구체적인 PK 변형보다 먼저지만 라벨은 동일
    assert identify_file_type(b"PK\x05\x06") == "ZIP/Office"


def test_short_header_does_not_match():
    from bytefeatures import identify_file_type

    assert identify_file_type(b"\xff\xd8") == "Unknown"
    assert identify_file_type(b"\x89P") == "Unknown"


def test_text_heuristic_fallback():
    from bytefeatures import identify_file_type

    assert identify_file_type(b"hello world\n") == "Text"
    assert identify_file_type(b"line one\r\n\tline two") == "Text"
    # 앞 16바이트만 검사
    assert identify_file_type(b"a" * 16 + b"\x00\x01") == "Text"
    assert identify_file_type(b"abc\x00def") == "Unknown"


def test_identify_is_deterministic(random_bytes):
    from bytefeatures import identify_file_type

    header = random_bytes[:32]
    assert len({identify_file_type(header) for _ in range(5)}) == 1


def test_signature_hex_preview():
    from bytefeatures import signature_hex

    assert signature_hex(b"\xff\xd8\xff") == "ff d8 ff"
    assert signature_hex(bytes(range(32))) == "00 01 02 03 04 05 06 07..."
    assert signature_hex(b"") == ""


@pytest.mark.parametrize(
    "header, label",
    [
        (b"GIF89a\x01\x00\x01\x00", "GIF"),
        (b"GIF87a\x01\x00", "GIF"),
        (bytes.fromhex("D0CF11E0A1B11AE1"), "Microsoft Office"),
        (bytes.fromhex("1F8B08000000"), "GZIP"),
        (bytes.fromhex("000001BA4400"), "MPEG"),
        (bytes.fromhex("377ABCAF271C0004"), "7-Zip"),
        (b"Rar!\x1a\x07\x00\xcf", "RAR"),
        (b"Rar!\x1a\x07\x01\x00", "RAR"),
        (b"{\\rtf1\\ansi\\deff0", "RTF"),
        (b"fLaC\x00\x00\x00\x22", "FLAC"),
        (bytes.fromhex("49492A0008000000"), "TIFF"),
        (bytes.fromhex("4D4D002A00000008"), "TIFF"),
        (bytes.fromhex("FFFB9064"), "MP3"),
        (bytes.fromhex("FFF38844"), "MP3"),
        (bytes.fromhex("FFF25044"), "MP3"),
    ],
)
def test_signature_table_rows(header, label):
    from bytefeatures import identify_file_type

    assert identify_file_type(header) == label


def test_mp4_with_small_ftyp_box_hits_mpeg_row_first():
    from bytefeatures import identify_file_type

    # 박스 크기 0x00000100 → 00 00 01 로 시작
    assert identify_file_type(b"\x00\x00\x01\x00ftypisom") == "MPEG"
