# triage/common.py
import json
import mimetypes
from pathlib import Path
from typing import Optional

from bytefeatures import InvalidInputError


def log(msg: str) -> None:
    """간단한 로깅 함수."""
    print(f"[LOG] {msg}")


# =========================
# 파일 샘플 읽기
# =========================

def read_sample(path: Path, size: int) -> bytes:
    """
    파일 앞부분 size 바이트 (파일이 더 짧으면 있는 만큼만)
    size < 0 이면 파일 전체를 읽게 되므로 InvalidInputError
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise InvalidInputError(f"sample size must be a non-negative integer, got {size!r}")

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No such file: {path}")

    with path.open("rb") as f:
        return f.read(size)


def declared_type_for(path: Path) -> Optional[str]:
    """
    파일 이름 기준 선언 타입
    - mimetypes 로 MIME 추정 (예: 'image/jpeg', 'text/plain')
    - 실패하면 확장자 그대로 (예: 'bin'), 확장자도 없으면 None
    """
    path = Path(path)
    mime, _ = mimetypes.guess_type(path.name)
    if mime:
        return mime

    ext = path.suffix.lstrip(".").lower()
    return ext or None


def list_input_files(input_dir: Path) -> list[Path]:
    """input_dir 아래 모든 '파일' (하위 디렉토리 포함, 정렬)."""
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise FileNotFoundError(f"No such directory: {input_dir}")

    files = [p for p in input_dir.rglob("*") if p.is_file()]
    files.sort()
    return files


# ----------------------
# JSON 저장 유틸
# ----------------------
def save_json(obj, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)
