from pathlib import Path

import pytest

from toolbench.indexer import (
    WORD_COUNTS_FILE,
    build_index,
    collect_files,
    main,
    tokenize,
)


@pytest.fixture
def docs(tmp_path):
    root = tmp_path / "docs"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("one two\nthree one\n", encoding="utf-8")
    (root / "sub" / "b.txt").write_text("two,two", encoding="utf-8")
    return root


def test_tokenize_splits_on_punctuation_and_spaces():
    assert tokenize("Hello, world!\tfoo_bar (baz)") == ["Hello", "world", "foo", "bar", "baz"]


def test_tokenize_keeps_non_ascii_words():
    assert tokenize("Привет мир") == ["Привет", "мир"]


def test_tokenize_empty_line():
    assert tokenize(" .,; ") == []


def test_collect_files_is_recursive_and_sorted(docs):
    assert collect_files(docs) == [str(docs / "a.txt"), str(docs / "sub" / "b.txt")]


def test_build_index_counts_words(docs, tmp_path):
    index = tmp_path / "index"
    counts = build_index(str(docs), str(index))
    a = str(docs / "a.txt")
    b = str(docs / "sub" / "b.txt")
    assert counts == {a: 4, b: 2}
    lines = (index / WORD_COUNTS_FILE).read_text(encoding="utf-8").splitlines()
    assert lines == [f"{a} 4", f"{b} 2"]


def test_build_index_writes_postings(docs, tmp_path):
    index = tmp_path / "index"
    build_index(str(docs), str(index))
    a = str(docs / "a.txt")
    b = str(docs / "sub" / "b.txt")
    assert (index / "one").read_text(encoding="utf-8").splitlines() == [f"{a} 0 0", f"{a} 1 1"]
    assert (index / "two").read_text(encoding="utf-8").splitlines() == [
        f"{a} 0 1",
        f"{b} 0 0",
        f"{b} 0 1",
    ]


def test_build_index_appends_on_rebuild(docs, tmp_path):
    index = tmp_path / "index"
    build_index(str(docs), str(index))
    first = (index / "three").read_text(encoding="utf-8").splitlines()
    build_index(str(docs), str(index))
    second = (index / "three").read_text(encoding="utf-8").splitlines()
    assert second == first * 2


def test_build_index_missing_directory(tmp_path):
    with pytest.raises(OSError):
        build_index(str(tmp_path / "absent"), str(tmp_path / "index"))


def test_main_requires_two_arguments():
    assert main(["only-one"]) == 2


def test_main_builds_index(docs, tmp_path):
    index = tmp_path / "index"
    assert main([str(docs), str(index)]) == 0
    assert Path(index / WORD_COUNTS_FILE).is_file()
    assert (index / "three").is_file()