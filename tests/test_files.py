import io
import os

import pytest

from pipex.errors import USAGE_HERE_DOC, UsageError
from pipex.files import (
    DEFAULT_PROMPT,
    collect_here_doc,
    detect_here_doc,
    open_infile,
    open_outfile,
)


def test_detect_here_doc_true():
    assert detect_here_doc(["here_doc", "EOF", "cat", "wc", "out"]) is True


def test_detect_here_doc_false_for_regular_infile():
    assert detect_here_doc(["infile", "cat", "wc", "out"]) is False


def test_detect_here_doc_requires_exact_word():
    assert detect_here_doc(["here_docs", "EOF", "cat", "wc", "out"]) is False


def test_detect_here_doc_too_few_arguments():
    with pytest.raises(UsageError) as info:
        detect_here_doc(["here_doc", "EOF", "cat", "out"])
    assert info.value.usage == USAGE_HERE_DOC


def test_collect_stops_at_limiter():
    source = io.StringIO("a\nb\nEOF\nc\n")
    assert collect_here_doc("EOF", source, None) == "a\nb\n"


def test_collect_ignores_lines_only_starting_with_limiter():
    source = io.StringIO("EOFX\nEO\nEOF\n")
    assert collect_here_doc("EOF", source, None) == "EOFX\nEO\n"


def test_collect_ends_at_end_of_input():
    source = io.StringIO("x\ny\n")
    assert collect_here_doc("END", source, None) == "x\ny\n"


def test_collect_writes_prompt_before_each_line(capsys):
    source = io.StringIO("one\ntwo\nSTOP\n")
    text = collect_here_doc("STOP", source)
    assert text == "one\ntwo\n"
    assert capsys.readouterr().out == DEFAULT_PROMPT * 3


def test_open_infile_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_infile(tmp_path / "missing.txt")


def test_open_infile_reads_bytes(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"data\n")
    with open_infile(path) as handle:
        assert handle.read() == b"data\n"


def test_open_outfile_truncates(tmp_path):
    path = tmp_path / "out.txt"
    path.write_bytes(b"old contents that are long\n")
    with open_outfile(path) as handle:
        handle.write(b"new\n")
    assert path.read_bytes() == b"new\n"


def test_open_outfile_appends(tmp_path):
    path = tmp_path / "out.txt"
    path.write_bytes(b"first\n")
    with open_outfile(path, append=True) as handle:
        handle.write(b"second\n")
    assert path.read_bytes() == b"first\nsecond\n"


def test_open_outfile_creates_with_mode(tmp_path):
    path = tmp_path / "created.txt"
    old = os.umask(0o022)
    try:
        with open_outfile(path) as handle:
            handle.write(b"x")
    finally:
        os.umask(old)
    assert os.stat(path).st_mode & 0o777 == 0o644


def test_open_outfile_in_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_outfile(tmp_path / "nodir" / "out.txt")