from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str, *, skip_blank: bool = False) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines with line terminators removed.
    CRLF and lone CR endings are handled by splitlines(), so no entry keeps a
    stray '\\r'. Undecodable bytes are replaced rather than raising.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    lines = p.read_text(encoding="utf-8", errors="replace").splitlines()
    if skip_blank:
        lines = [ln for ln in lines if ln.strip()]
    return lines


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one entry per line to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
