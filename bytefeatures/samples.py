"""
입력 경계(boundary) 처리
bytes / bytearray / memoryview / numpy 배열 / 정수 iterable 을 uint8 배열로 변환
"""

import numpy as np


class InvalidInputError(ValueError):
    """바이트 범위(0-255)를 벗어나거나 바이트 시퀀스가 아닌 입력."""


def as_uint8_array(sample) -> np.ndarray:
    """
    샘플을 1차원 uint8 numpy 배열로 변환 (가능하면 복사 X)
    - 값이 0~255 범위를 벗어나면 잘라내지 않고 InvalidInputError
    """
    if sample is None or isinstance(sample, str):
        raise InvalidInputError(f"byte sequence expected, got {type(sample).__name__}")

    if isinstance(sample, (bytes, bytearray)):
        return np.frombuffer(sample, dtype=np.uint8)

    if isinstance(sample, memoryview):
        fmt = sample.format.lstrip("@=<>!")
        if sample.itemsize == 1 and fmt in ("B", "c"):
            return np.frombuffer(sample.tobytes(), dtype=np.uint8)
        # 'b'(signed) 나 더 넓은 정수 포맷은 값 단위로 풀어서 범위 검사
        sample = sample.tolist()

    if isinstance(sample, np.ndarray):
        if sample.dtype == np.uint8:
            return sample.ravel()
        if not np.issubdtype(sample.dtype, np.integer):
            raise InvalidInputError(f"integer array expected, got dtype={sample.dtype}")
        arr = sample.ravel()
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise InvalidInputError("byte values must be in range 0-255")
        return arr.astype(np.uint8)

    try:
        values = list(sample)
    except TypeError:
        raise InvalidInputError(f"byte sequence expected, got {type(sample).__name__}") from None

    for v in values:
        # bool 은 int 의 서브클래스라 따로 걸러냄
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
            raise InvalidInputError(f"non-integer byte value: {v!r}")
        if v < 0 or v > 255:
            raise InvalidInputError(f"byte value out of range 0-255: {v}")

    return np.array(values, dtype=np.uint8)


def as_bytes(sample) -> bytes:
    """as_uint8_array 와 같은 검증을 거친 뒤 bytes 로 반환."""
    if isinstance(sample, bytes):
        return sample
    return as_uint8_array(sample).tobytes()


def require_int(value, name: str) -> int:
    """n-gram 길이/개수 같은 정수 파라미터 검증."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    return int(value)
