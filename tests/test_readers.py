import pytest

from speech_analysis.config import ConfigError
from speech_analysis.readers import get_source_reader, read_source_lines
from speech_analysis.readers.base import ReaderError
from speech_analysis.readers.text_reader import TextSourceReader


def test_text_file_lines(tmp_path):
    path = tmp_path / "speech.txt"
    path.write_bytes(b"First line\r\nSecond line\rThird\n")

    assert read_source_lines(path) == ["First line", "Second line", "Third", ""]


def test_markdown_is_read_as_text(tmp_path):
    path = tmp_path / "speech.md"
    path.write_text("# Title\n\nBody\n", encoding="utf-8")

    assert isinstance(get_source_reader(path), TextSourceReader)


def test_unsupported_format(tmp_path):
    path = tmp_path / "speech.pdf"
    path.write_bytes(b"%PDF")

    with pytest.raises(ConfigError, match="Unsupported"):
        read_source_lines(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        read_source_lines(tmp_path / "missing.txt")


def test_invalid_utf8_reports_line(tmp_path):
    path = tmp_path / "speech.txt"
    path.write_bytes(b"ok\nbroken \xff here\n")

    with pytest.raises(ReaderError) as info:
        TextSourceReader().read_lines(path)

    assert info.value.line == 2
    assert "speech.txt:2" in str(info.value)

    with pytest.raises(ConfigError):
        read_source_lines(path)


def test_odt_paragraphs(tmp_path):
    from odfdo import Document, Paragraph

    path = tmp_path / "speech.odt"
    doc = Document("text")
    doc.body.append(Paragraph("I have a dream"))
    doc.body.append(Paragraph("Let freedom   ring"))
    doc.save(path)

    lines = read_source_lines(path)

    assert [line for line in lines if line] == ["I have a dream", "Let freedom ring"]


def test_broken_odt(tmp_path):
    path = tmp_path / "speech.odt"
    path.write_bytes(b"not a zip file")

    with pytest.raises(ConfigError, match="ODT"):
        read_source_lines(path)
