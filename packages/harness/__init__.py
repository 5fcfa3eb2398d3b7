from .core import run_once, run_benchmark, summarize_timings
from .io import ranking_as_dicts, write_csv, write_manifest

__all__ = ["run_once", "run_benchmark", "summarize_timings", "ranking_as_dicts", "write_csv", "write_manifest"]
