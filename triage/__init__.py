"""
triage 패키지
파일/샘플 단위 분석 리포트와 일괄 처리
"""

from .report import AnalysisReport, analyze_sample, analyze_file
from .batch import analyze_files, build_report_frame, run_batch

__all__ = [
    'AnalysisReport',
    'analyze_sample',
    'analyze_file',
    'analyze_files',
    'build_report_frame',
    'run_batch',
]
