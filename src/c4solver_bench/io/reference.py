from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

import pandas as pd

REFERENCE_COLS = ["source", "line", "moves", "expected"]


class ReferenceFormatError(ValueError):
    def __init__(self, source: str, line: int, text: str, reason: str) -> None:
        super().__init__(f"{source}:{line}: {reason}: {text!r}")
        self.source = source
        self.line = line


@dataclass(frozen=True)
class ReferenceLine:
    """One `<moveDigits> <expectedScore>` entry of a reference file."""
    source: str
    line: int
    moves: str
    expected: int


def parse_reference_line(text: str, source: str = "<string>", line: int = 1) -> ReferenceLine | None:
    """
    Parse one line. Blank lines and `#` comments give None.
    """
    s = text.split("#", 1)[0].strip()
    if not s:
        return None

    parts = s.split()
    if len(parts) != 2:
        raise ReferenceFormatError(source, line, text, "expected '<moves> <score>'")
    moves, expected = parts
    if not moves.isdigit():
        raise ReferenceFormatError(source, line, text, "moves must be column digits")
    try:
        value = int(expected)
    except ValueError:
        raise ReferenceFormatError(source, line, text, "score must be an integer") from None

    return ReferenceLine(source=source, line=line, moves=moves, expected=value)


def read_reference_file(path: Path) -> List[ReferenceLine]:
    if not path.exists():
        raise FileNotFoundError(f"Reference file not found: {path}")

    out: List[ReferenceLine] = []
    with path.open(encoding="utf-8") as fh:
        for i, text in enumerate(fh, start=1):
            entry = parse_reference_line(text, source=path.name, line=i)
            if entry is not None:
                out.append(entry)
    return out


def load_reference(paths: Iterable[Path]) -> pd.DataFrame:
    rows = []
    for p in paths:
        rows.extend(read_reference_file(Path(p)))

    df = pd.DataFrame(
        [(r.source, r.line, r.moves, r.expected) for r in rows],
        columns=REFERENCE_COLS,
    )
    df["moves"] = df["moves"].astype(str)
    df["expected"] = df["expected"].astype(int)
    return df


def reference_files(ref_dir: Path, pattern: str = "*.txt") -> List[Path]:
    if not ref_dir.exists():
        raise FileNotFoundError(f"Reference directory not found: {ref_dir}")

    files = sorted(ref_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {ref_dir}")
    return files
