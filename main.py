# main.py
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from config import DEFAULT_TOP_M, RESULTS_DIR, STATS_SAMPLE_SIZE
from triage.batch import run_batch, summarize_frame
from triage.report import analyze_file


def non_negative_int(value: str) -> int:
    """--sample-size 검증 (음수면 파일 전체를 읽게 됨)."""
    size = int(value)
    if size < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Statistical file-content triage")
    sub = parser.add_subparsers(dest="command", required=True)

    p_one = sub.add_parser("analyze", help="단일 파일 분석 결과를 JSON 으로 출력")
    p_one.add_argument("path", type=Path)
    p_one.add_argument("--sample-size", type=non_negative_int, default=STATS_SAMPLE_SIZE)
    p_one.add_argument("--declared-type", default=None)
    p_one.add_argument("--ngram", type=int, action="append", dest="ngram_sizes",
                       help="n-gram 길이 (여러 번 지정 가능)")
    p_one.add_argument("--top", type=int, default=DEFAULT_TOP_M, dest="top_m")
    p_one.add_argument("--no-compression", action="store_true")

    p_batch = sub.add_parser("batch", help="디렉토리 전체 분석 → CSV/JSON 저장")
    p_batch.add_argument("input_dir", type=Path)
    p_batch.add_argument("--out-dir", type=Path, default=RESULTS_DIR)
    p_batch.add_argument("--sample-size", type=non_negative_int, default=STATS_SAMPLE_SIZE)
    p_batch.add_argument("--single-process", action="store_true")
    p_batch.add_argument("--no-compression", action="store_true")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "analyze":
        kwargs = {"top_m": args.top_m, "include_compression": not args.no_compression}
        if args.ngram_sizes:
            kwargs["ngram_sizes"] = tuple(args.ngram_sizes)

        report = analyze_file(
            args.path,
            sample_size=args.sample_size,
            declared_type=args.declared_type,
            **kwargs,
        )
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        return 0

    df = run_batch(
        args.input_dir,
        out_dir=args.out_dir,
        sample_size=args.sample_size,
        use_multiprocessing=not args.single_process,
        include_compression=not args.no_compression,
    )
    print(json.dumps(summarize_frame(df), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    # 사용법:
    #   python main.py analyze some.bin
    #   python main.py analyze some.bin --ngram 2 --ngram 4 --top 20
    #   python main.py batch raw/ --out-dir results/
    sys.exit(main())
