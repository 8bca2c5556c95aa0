"""Builds an on-disk inverted index of the words in a directory tree."""

from __future__ import annotations

import re
import sys
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

WORD_COUNTS_FILE = "words_numbers"
_DELIMITERS = "\t !\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
_SPLIT = re.compile("[" + re.escape(_DELIMITERS) + "]+")


@dataclass(frozen=True)
class Posting:
    """One occurrence of a word: file, zero-based line and word position."""

    file_name: str
    line: int
    position: int


def tokenize(line: str) -> List[str]:
    """Split a line into words at spaces, tabs and ASCII punctuation."""
    return [word for word in _SPLIT.split(line) if word]


def collect_files(directory) -> List[str]:
    """Return the paths of all files under ``directory``, recursively, sorted."""
    found: List[str] = []
    for entry in sorted(Path(directory).iterdir()):
        if entry.is_dir():
            found.extend(collect_files(entry))
        else:
            found.append(str(entry))
    return found


def build_index(directory, index_path) -> Dict[str, int]:
    """Index every file under ``directory`` into ``index_path``.

    The index directory gets a ``words_numbers`` file of ``name count``
    lines and one file per word of ``name line position`` lines. Existing
    index files are appended to. Returns the word count of each file.
    """
    index_dir = Path(index_path)
    index_dir.mkdir(exist_ok=True)
    postings: Dict[str, List[Posting]] = defaultdict(list)
    counts: Dict[str, int] = {}
    for file_name in collect_files(directory):
        count = 0
        with open(file_name, encoding="utf-8", errors="replace") as handle:
            for line_number, line in enumerate(handle):
                for position, word in enumerate(tokenize(line.rstrip("\n"))):
                    postings[word].append(Posting(file_name, line_number, position))
                    count += 1
        counts[file_name] = count

    with open(index_dir / WORD_COUNTS_FILE, "a", encoding="utf-8") as out:
        out.writelines(f"{name} {count}\n" for name, count in counts.items())
    for word, entries in postings.items():
        with open(index_dir / word, "a", encoding="utf-8") as out:
            out.writelines(
                f"{entry.file_name} {entry.line} {entry.position}\n" for entry in entries
            )
    return counts


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Index a directory: ``<directory> <index-path>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: indexer <directory> <index-path>", file=sys.stderr)
        return 2
    try:
        build_index(args[0], args[1])
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())