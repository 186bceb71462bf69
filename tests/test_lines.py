import io

import pytest

from minishell.lines import LineReader

TEXT = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 3, 10, 100])
def test_lines_reassemble_text(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "last without newline"
    assert len(lines) == TEXT.count("\n") + 1


def test_read_line_returns_line_with_newline():
    reader = LineReader(io.StringIO("ab\ncd\n"), 4)
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd\n"
    assert reader.read_line() is None


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_stays_none_after_end():
    reader = LineReader(io.StringIO("only"))
    assert reader.read_line() == "only"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_lines_are_kept():
    assert list(LineReader(io.StringIO("\n\n"), 1)) == ["\n", "\n"]


def test_binary_stream():
    data = b"one\ntwo"
    assert list(LineReader(io.BytesIO(data), 2)) == [b"one\n", b"two"]


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_reads_use_buffer_size():
    sizes = []

    class Recording(io.StringIO):
        def read(self, n=-1):
            sizes.append(n)
            return super().read(n)

    lines = list(LineReader(Recording("abcdefg\nhi\n"), 3))
    assert lines == ["abcdefg\n", "hi\n"]
    assert set(sizes) == {3}


def test_read_error_propagates():
    class Broken(io.StringIO):
        def read(self, n=-1):
            raise OSError("read failed")

    with pytest.raises(OSError):
        LineReader(Broken()).read_line()