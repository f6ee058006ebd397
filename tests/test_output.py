import os

import pytest

from pipex.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _capture(write):
    read_end, write_end = os.pipe()
    try:
        write(write_end)
    finally:
        os.close(write_end)
    chunks = []
    with os.fdopen(read_end, "rb") as reader:
        chunks.append(reader.read())
    return b"".join(chunks)


def test_putchar_fd():
    assert _capture(lambda fd: putchar_fd("R", fd)) == b"R"


def test_putchar_fd_bytes():
    assert _capture(lambda fd: putchar_fd(b"R", fd)) == b"R"


def test_putchar_fd_rejects_long_text():
    with pytest.raises(ValueError):
        putchar_fd("RR", 1)


def test_putstr_fd():
    assert _capture(lambda fd: putstr_fd("Bye bye", fd)) == b"Bye bye"


def test_putstr_fd_empty():
    assert _capture(lambda fd: putstr_fd("", fd)) == b""


def test_putstr_fd_rejects_non_text():
    with pytest.raises(TypeError):
        putstr_fd(42, 1)


def test_putendl_fd():
    assert _capture(lambda fd: putendl_fd("Get me a line", fd)) == b"Get me a line\n"


def test_putendl_fd_empty_writes_newline():
    assert _capture(lambda fd: putendl_fd("", fd)) == b"\n"


@pytest.mark.parametrize("number", [-425, 0, 7, 42, 2147483647])
def test_putnbr_fd_round_trip(number):
    assert int(_capture(lambda fd: putnbr_fd(number, fd))) == number


def test_putnbr_fd_example():
    assert _capture(lambda fd: putnbr_fd(-425, fd)) == b"-425"


def test_putnbr_fd_int_min():
    assert _capture(lambda fd: putnbr_fd(-2147483648, fd)) == b"-2147483648"


def test_writes_to_file(tmp_path):
    target = tmp_path / "out.txt"
    fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    try:
        putstr_fd("Bye", fd)
        putchar_fd(" ", fd)
        putnbr_fd(-425, fd)
        putendl_fd("", fd)
    finally:
        os.close(fd)
    assert target.read_bytes() == b"Bye -425\n"


def test_write_to_closed_fd_raises():
    read_end, write_end = os.pipe()
    os.close(read_end)
    os.close(write_end)
    with pytest.raises(OSError):
        putstr_fd("x", write_end)