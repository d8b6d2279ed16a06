from pathlib import Path
import io

import pytest

from topicsummary.core.errors import SinkWriteError
from topicsummary.core.output import describe_sink, write_report


def test_stream_sink_appends_one_newline() -> None:
    buffer = io.StringIO()
    write_report("[]", buffer)
    assert buffer.getvalue() == "[]\n"


def test_path_sink_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "out.txt"
    write_report("hello", target)
    assert target.read_text(encoding="utf-8") == "hello\n"


def test_path_sink_accepts_str_and_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    target.write_text("old contents that are longer")
    write_report("new", str(target))
    assert target.read_text(encoding="utf-8") == "new\n"
    assert [p.name for p in tmp_path.iterdir()] == ["out.txt"]


def test_unicode_tokens_are_utf8(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    write_report('{"café": 1.000000}', target)
    assert target.read_bytes().decode("utf-8") == '{"café": 1.000000}\n'


def test_closed_stream() -> None:
    buffer = io.StringIO()
    buffer.close()
    with pytest.raises(SinkWriteError) as exc_info:
        write_report("[]", buffer)
    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_directory_as_path(tmp_path: Path) -> None:
    with pytest.raises(SinkWriteError) as exc_info:
        write_report("[]", tmp_path)
    assert exc_info.value.sink == str(tmp_path)


def test_stream_that_raises_oserror() -> None:
    class BrokenPipe:
        name = "<broken>"

        def write(self, text):
            raise BrokenPipeError("pipe closed")

    with pytest.raises(SinkWriteError) as exc_info:
        write_report("[]", BrokenPipe())
    assert "<broken>" in str(exc_info.value)


def test_describe_sink(tmp_path: Path) -> None:
    assert describe_sink(tmp_path / "a.txt") == str(tmp_path / "a.txt")
    assert describe_sink(io.StringIO()) == "<StringIO>"
