"""
여러 파일 일괄 triage
파일별 analyze_file → 1행 요약 → DataFrame / CSV / JSON
"""

from pathlib import Path
from multiprocessing import Pool, cpu_count

import pandas as pd
from tqdm import tqdm

from config import MAX_WORKERS, RESULTS_DIR, STATS_SAMPLE_SIZE

from .common import list_input_files, log, save_json
from .report import analyze_file


# ===============================
# 단일 파일 행 생성
# ===============================
def compute_file_row(path: Path, sample_size: int = STATS_SAMPLE_SIZE, include_compression: bool = True):
    """
    파일 하나를 분석해서 CSV 1행 dict 반환
    """
    report = analyze_file(path, sample_size=sample_size, include_compression=include_compression)
    return {
        "path": str(path),
        **report.to_row(),
    }


# ===============================
# 멀티프로세싱용 래퍼
# ===============================
def _process_file_wrapper(args):
    """
    multiprocessing.Pool에서 사용되는 래퍼 함수
    """
    path, sample_size, include_compression = args
    return compute_file_row(path, sample_size=sample_size, include_compression=include_compression)


# ===============================
# 파일 목록 처리
# ===============================
def analyze_files(
    paths,
    sample_size: int = STATS_SAMPLE_SIZE,
    use_multiprocessing: bool = True,
    include_compression: bool = True,
):
    """
    파일 목록을 분석해서 행 리스트 반환 (입력 순서 유지)
    """
    file_args = [(Path(p), sample_size, include_compression) for p in paths]
    num_files = len(file_args)

    if use_multiprocessing and num_files > 1:
        num_workers = min(cpu_count(), MAX_WORKERS, num_files)
        log(f"Processing {num_files} file(s) with {num_workers} workers...")

        with Pool(processes=num_workers) as pool:
            rows = list(
                tqdm(
                    pool.imap(_process_file_wrapper, file_args),
                    total=num_files,
                    desc="Files",
                    leave=False,
                    unit="file",
                )
            )

    else:
        log(f"Processing {num_files} file(s) (single process)...")
        rows = []
        for args in tqdm(file_args, desc="Files", leave=False, unit="file"):
            rows.append(_process_file_wrapper(args))

    return rows


def build_report_frame(rows) -> pd.DataFrame:
    """행 리스트 → DataFrame (행이 없으면 빈 DataFrame)."""
    if not rows:
        return pd.DataFrame()
    return pd.DataFrame(rows).reset_index(drop=True)


def summarize_frame(df: pd.DataFrame) -> dict:
    """탐지 타입 분포 / binary 비율 / 압축 의심 개수 요약."""
    total = len(df)
    if total == 0:
        return {"total_files": 0, "detected_types": {}, "binary_ratio": 0.0, "compression_likely": 0}

    counts = df["detected_type"].value_counts()
    return {
        "total_files": total,
        "detected_types": {str(k): int(v) for k, v in counts.items()},
        "binary_ratio": float(df["is_binary"].mean()),
        "compression_likely": int(df["compression_likely"].sum()),
    }


# ===============================
# 디렉토리 단위 처리
# ===============================
def run_batch(
    input_dir: Path,
    out_dir: Path = RESULTS_DIR,
    sample_size: int = STATS_SAMPLE_SIZE,
    use_multiprocessing: bool = True,
    include_compression: bool = True,
) -> pd.DataFrame:
    """
    input_dir 아래 모든 파일 분석 후
      - {out_dir}/triage.csv  : 파일별 요약
      - {out_dir}/triage.json : 전체 요약 + 파일별 요약
    저장하고 DataFrame 반환
    """
    files = list_input_files(input_dir)
    if not files:
        raise FileNotFoundError(f"[batch] 분석할 파일이 없습니다: {input_dir}")

    log(f"[batch] input_dir = {input_dir}")
    log(f"[batch] num_files = {len(files)}")

    rows = analyze_files(
        files,
        sample_size=sample_size,
        use_multiprocessing=use_multiprocessing,
        include_compression=include_compression,
    )
    df = build_report_frame(rows)

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    csv_path = out_dir / "triage.csv"
    df.to_csv(csv_path, index=False)
    log(f"[batch] csv saved to: {csv_path}")

    json_path = out_dir / "triage.json"
    save_json({"summary": summarize_frame(df), "files": rows}, json_path)
    log(f"[batch] json saved to: {json_path}")

    return df
