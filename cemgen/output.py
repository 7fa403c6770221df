"""Persistence of generated files."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Writer(Protocol):
    """Anything that can persist generated text and report where it went."""

    def save(self, outdir: str, file_name: str, content: str) -> Path:
        ...


class OutputWriter:
    """Writes generated files, creating the output directory on demand."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = base_dir

    def save(self, outdir: str, file_name: str, content: str) -> Path:
        directory = Path(outdir).expanduser()
        if self.base_dir is not None and not directory.is_absolute():
            directory = self.base_dir / directory
        directory.mkdir(parents=True, exist_ok=True)
        path = (directory / file_name).resolve()
        path.write_text(content, encoding="utf-8")
        return path


__all__ = ["OutputWriter", "Writer"]
