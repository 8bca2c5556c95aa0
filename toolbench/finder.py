"""Ranked search over an index built by the indexer."""

from __future__ import annotations

import math
import sys
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from toolbench.indexer import WORD_COUNTS_FILE, Posting
from toolbench.query import Connective, Operand, Query, QueryError, parse_query

Weights = Dict[Tuple[str, str], float]


def load_word_counts(index_path) -> Dict[str, int]:
    """Read the word count of each indexed file; a missing file gives ``{}``."""
    path = Path(index_path) / WORD_COUNTS_FILE
    if not path.is_file():
        return {}
    counts: Dict[str, int] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        parts = line.rsplit(maxsplit=1)
        if len(parts) != 2:
            raise ValueError(f"malformed line in {path}: {line!r}")
        counts[parts[0]] = int(parts[1])
    return counts


def _read_postings(index_path, word: str) -> Optional[List[Posting]]:
    path = Path(index_path) / word
    if not path.is_file():
        return None
    postings: List[Posting] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        parts = line.rsplit(maxsplit=2)
        if len(parts) != 3:
            raise ValueError(f"malformed line in {path}: {line!r}")
        postings.append(Posting(parts[0], int(parts[1]), int(parts[2])))
    return postings


def compute_tf_idf(query: Query, index_path) -> Weights:
    """Weight every (file, word) pair for the words of ``query``.

    The term frequency is occurrences over the file's word count; the
    inverse document frequency is ``log(files // files_with_word) + 1``.
    Files without the word, and words not in the index, weigh 0.
    """
    counts = load_word_counts(index_path)
    weights: Weights = {}
    for word in query.words():
        postings = _read_postings(index_path, word) or []
        per_file = Counter(posting.file_name for posting in postings)
        idf = 0.0
        if per_file:
            ratio = len(counts) // len(per_file)
            if ratio == 0:
                raise ValueError(f"index at {index_path} lists fewer files than word {word!r}")
            idf = math.log(ratio) + 1
        for name, total in counts.items():
            if name in per_file:
                weights[(name, word)] = per_file[name] / total * idf
            else:
                weights[(name, word)] = 0.0
    return weights


def _score(operand: Operand, weights: Weights, file_name: str) -> float:
    if isinstance(operand, str):
        return weights.get((file_name, operand), 0.0)
    left = _score(operand.left, weights, file_name)
    right = _score(operand.right, weights, file_name)
    if operand.connective is Connective.OR:
        return left + right
    return min(left, right)


def rank(query: Query, tf_idf: Weights, word_counts: Dict[str, int]) -> List[Tuple[float, str]]:
    """Score each file (OR adds, AND takes the minimum) and drop zero scores.

    Returns ``(score, file)`` pairs, highest first; ties put the greater
    file name first.
    """
    scored = []
    for name in word_counts:
        score = _score(query.root, tf_idf, name)
        if score != 0:
            scored.append((score, name))
    scored.sort(reverse=True)
    return scored


def find(index_path, output_path, tokens: Sequence[str]) -> List[Tuple[float, str]]:
    """Run a query against an index and write the report to ``output_path``.

    For each ranked file the report lists, per query word in sorted order,
    the one-based line and word positions where it occurs. Returns the
    ranking.
    """
    query = parse_query(tokens)
    weights = compute_tf_idf(query, index_path)
    ranking = rank(query, weights, load_word_counts(index_path))
    words = sorted(query.words())
    postings = {word: _read_postings(index_path, word) or [] for word in words}
    with open(output_path, "w", encoding="utf-8") as out:
        for _, name in ranking:
            out.write(f"{name}\n")
            for word in words:
                out.write(f"word : {word}\n")
                for posting in postings[word]:
                    if posting.file_name == name:
                        out.write(
                            f"line position : {posting.line + 1};  "
                            f"word position : {posting.position + 1}\n"
                        )
            out.write("\n")
    return ranking


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Search an index: ``<index-path> <output-file> <query tokens...>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        print("usage: finder <index-path> <output-file> <query...>", file=sys.stderr)
        return 2
    try:
        find(args[0], args[1], args[2:])
    except QueryError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())