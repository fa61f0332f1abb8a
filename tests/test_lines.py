import os

import pytest

from ftkit.lines import LineReader, get_next_line


@pytest.fixture
def make_fd(tmp_path):
    opened = []

    def _make(data: bytes, name: str = "input.txt") -> int:
        path = tmp_path / name
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _make
    for fd in opened:
        os.close(fd)


def test_reads_lines_with_newlines(make_fd):
    fd = make_fd(b"a\nbb\nccc")
    reader = LineReader(fd)
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "bb\n"
    assert reader.read_line() == "ccc"
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 64, 10000])
def test_buffer_size_does_not_change_lines(make_fd, size):
    data = "first line\nsecond\n\nthird without end"
    fd = make_fd(data.encode())
    lines = list(LineReader(fd, size))
    assert "".join(lines) == data
    assert all(line.endswith("\n") for line in lines[:-1])
    assert len(lines) == data.count("\n") + 1


def test_empty_input_gives_none(make_fd):
    fd = make_fd(b"")
    assert LineReader(fd).read_line() is None


def test_multibyte_character_split_across_reads(make_fd):
    text = "caf\u00e9\n\u00fcber\n"
    fd = make_fd(text.encode("utf-8"))
    assert list(LineReader(fd, 1)) == ["caf\u00e9\n", "\u00fcber\n"]


def test_iteration_stops_at_end(make_fd):
    fd = make_fd(b"x\ny\n")
    reader = LineReader(fd)
    assert list(reader) == ["x\n", "y\n"]
    assert reader.read_line() is None


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0, 0)


def test_invalid_fd():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_read_error_propagates(tmp_path):
    fd = os.open(tmp_path, os.O_RDONLY)
    try:
        with pytest.raises(OSError):
            LineReader(fd).read_line()
    finally:
        os.close(fd)


def test_get_next_line_reads_whole_file(make_fd):
    data = "one\ntwo\nthree\n"
    fd = make_fd(data.encode())
    lines = []
    while (line := get_next_line(fd)) is not None:
        lines.append(line)
    assert lines == data.splitlines(keepends=True)


def test_get_next_line_interleaves_descriptors(make_fd):
    fd1 = make_fd(b"a1\na2\n", "one.txt")
    fd2 = make_fd(b"b1\nb2\n", "two.txt")
    assert get_next_line(fd1) == "a1\n"
    assert get_next_line(fd2) == "b1\n"
    assert get_next_line(fd1) == "a2\n"
    assert get_next_line(fd2) == "b2\n"
    assert get_next_line(fd1) is None
    assert get_next_line(fd2) is None


def test_get_next_line_from_pipe():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"piped\nrest")
        os.close(write_fd)
        assert get_next_line(read_fd) == "piped\n"
        assert get_next_line(read_fd) == "rest"
        assert get_next_line(read_fd) is None
    finally:
        os.close(read_fd)


def test_get_next_line_invalid_fd():
    with pytest.raises(ValueError):
        get_next_line(-1)