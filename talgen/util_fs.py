"""Source and page file access for talgen builds."""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write a generated page or demo source, creating parent directories."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def read_text(path: PathLike, *, encoding: str = "utf-8") -> str:
    return Path(path).read_text(encoding=encoding)


__all__ = ["read_text", "write_text"]
