import pytest

from mothership.file_utils import load_text_file


def test_last_line_gets_newline(tmp_path):
    path = tmp_path / "shader.glsl"
    path.write_text("void main()\n{\n}", encoding="utf-8")
    assert load_text_file(path) == "void main()\n{\n}\n"


def test_trailing_newline_is_kept_once(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("one\ntwo\n", encoding="utf-8")
    assert load_text_file(str(path)) == "one\ntwo\n"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert load_text_file(path) == ""


def test_missing_file_raises(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(OSError, match="Error opening file"):
        load_text_file(missing)