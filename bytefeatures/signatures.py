"""
매직 넘버(시그니처) 기반 파일 타입 식별
테이블 순서대로 비교해서 처음 일치하는 항목이 이김
"""

from dataclasses import dataclass

from .samples import as_bytes


@dataclass(frozen=True)
class SignatureEntry:
    magic: bytes
    label: str
    offset: int = 0

    def matches(self, header: bytes) -> bool:
        end = self.offset + len(self.magic)
        # 헤더가 짧아서 비교할 바이트가 없으면 불일치
        if len(header) < end:
            return False
        return header[self.offset:end] == self.magic


# =========================================
# 시그니처 테이블 (import 시 한 번 생성, 이후 변경 없음)
# =========================================
# 앞부분은 기존 판별 순서 그대로 유지.
# 뒤에 붙인 항목들은 앞 항목과 prefix 가 겹치지 않는 것만.
SIGNATURES = (
    SignatureEntry(bytes.fromhex("FFD8FF"), "JPEG"),
    SignatureEntry(bytes.fromhex("89504E47"), "PNG"),
    SignatureEntry(bytes.fromhex("474946"), "GIF"),
    SignatureEntry(bytes.fromhex("25504446"), "PDF"),
    SignatureEntry(bytes.fromhex("504B"), "ZIP/Office"),
    SignatureEntry(bytes.fromhex("D0CF11E0"), "Microsoft Office"),
    SignatureEntry(bytes.fromhex("1F8B"), "GZIP"),
    SignatureEntry(b"ustar", "TAR", offset=257),
    SignatureEntry(b"RIFF", "WAV/AVI"),
    SignatureEntry(b"ID3", "MP3"),
    # ftyp 박스 크기가 0x100~0x1FF 인 MP4 도 00 00 01 로 시작해서 여기서 MPEG 로 잡힘 (알려진 충돌)
    SignatureEntry(bytes.fromhex("000001"), "MPEG"),
    SignatureEntry(b"OggS", "OGG"),
    SignatureEntry(b"ftyp", "MP4/MOV", offset=4),
    SignatureEntry(bytes.fromhex("377ABCAF271C"), "7-Zip"),
    SignatureEntry(b"Rar!\x1a\x07", "RAR"),
    SignatureEntry(b"{\\rtf", "RTF"),
    SignatureEntry(b"fLaC", "FLAC"),
    SignatureEntry(bytes.fromhex("49492A00"), "TIFF"),
    SignatureEntry(bytes.fromhex("4D4D002A"), "TIFF"),
    SignatureEntry(bytes.fromhex("FFFB"), "MP3"),
    SignatureEntry(bytes.fromhex("FFF3"), "MP3"),
    SignatureEntry(bytes.fromhex("FFF2"), "MP3"),
)

TEXT_BYTES = frozenset(range(32, 127)) | {9, 10, 13}


def looks_like_text(header: bytes, probe_size: int = 16) -> bool:
    """앞 probe_size 바이트가 전부 printable ASCII 또는 tab/LF/CR 인지."""
    return all(b in TEXT_BYTES for b in header[:probe_size])


def identify_file_type(header, table=SIGNATURES, probe_size: int = 16) -> str:
    """
    헤더 바이트로 타입 라벨 추정
    - 시그니처 일치: 해당 라벨
    - 불일치 + 텍스트처럼 보임: "Text"
    - 그 외: "Unknown" (실패가 아니라 정상 결과)
    """
    data = as_bytes(header)
    for entry in table:
        if entry.matches(data):
            return entry.label

    if looks_like_text(data, probe_size):
        return "Text"
    return "Unknown"


def signature_hex(header, width: int = 23) -> str:
    """
    화면 표시용 헤더 hex ("ff d8 ff e0 ...")
    앞 32바이트를 hex 로 펼친 뒤 width 자(기본 8바이트분) 넘으면 잘라서 "..." 붙임
    """
    data = as_bytes(header)[:32]
    text = " ".join(f"{b:02x}" for b in data)
    if len(text) > width:
        return text[:width] + "..."
    return text
