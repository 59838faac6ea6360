"""Read a folder of Markdown notes into records, taking properties from YAML front matter."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path

import yaml

from heatmap.models import Record

logger = getLogger(__name__)

_FRONT_MATTER_END = ("---", "...")


def split_front_matter(text: str) -> str | None:
    """Return the YAML between a leading '---' line and its closing '---' / '...', or None."""
    lines = text.lstrip("\ufeff").splitlines()
    if not lines or lines[0].strip() != "---":
        return None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() in _FRONT_MATTER_END:
            return "\n".join(lines[1:i])
    return None


def parse_properties(text: str) -> dict[str, object]:
    """
    Return a note's front-matter properties with lower-cased keys.
    Values keep their YAML types (numbers, booleans, dates, lists).
    Front matter that is not a mapping, or is not valid YAML, gives {}.
    """
    block = split_front_matter(text)
    if block is None:
        return {}
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError:
        logger.warning("invalid front matter, ignoring properties", exc_info=True)
        return {}
    if not isinstance(data, dict):
        return {}
    return {str(key).lower(): value for key, value in data.items()}


def _is_hidden(path: Path, vault_dir: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(vault_dir).parts)


def load_records(vault_dir: Path) -> list[Record]:
    """
    Scan vault_dir for *.md notes (hidden folders such as .obsidian skipped).
    Identity is the POSIX path relative to vault_dir. Unreadable notes are skipped.
    """
    vault_dir = Path(vault_dir)
    records: list[Record] = []
    if not vault_dir.is_dir():
        return records

    for note_path in sorted(vault_dir.rglob("*.md")):
        if not note_path.is_file() or _is_hidden(note_path, vault_dir):
            continue
        try:
            text = note_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.warning("skipping unreadable note %s", note_path, exc_info=True)
            continue

        records.append(
            Record(
                identity=note_path.relative_to(vault_dir).as_posix(),
                basename=note_path.stem,
                properties=parse_properties(text),
            )
        )
    return records
