"""Source file discovery for batch rendering"""

from pathlib import Path


SOURCE_EXTENSIONS = {'.md', '.markdown', '.txt'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown/text files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in SOURCE_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in SOURCE_EXTENSIONS)
