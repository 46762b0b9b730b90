from pathlib import Path

SOURCE_FILE_ENCODING = "utf-8"


def read_source_file(path: Path) -> str:
    """Read whole source file as text for lexical analysis."""
    with path.open("r", encoding=SOURCE_FILE_ENCODING, errors="strict") as f:
        return f.read()
