from .core import Query, parse_query_line, run_query, run_batch, MAX_INPUT_CHARS
from .io import write_csv, write_manifest
from .report import format_matches, summarize, NO_RESULTS

__all__ = ["Query", "parse_query_line", "run_query", "run_batch", "MAX_INPUT_CHARS",
           "write_csv", "write_manifest", "format_matches", "summarize", "NO_RESULTS"]
