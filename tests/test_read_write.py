import io
import warnings

import pytest
from hypothesis import given

import msdio

from .generators.msd_contents import parameter_lists, parameters, plain_components


def test_parse_msd_from_string():
    parameters = list(msdio.parse_msd("#VERSION:0.83;\n#TITLE:Springtime;"))
    assert parameters == [
        msdio.Parameter(["VERSION", "0.83"]),
        msdio.Parameter(["TITLE", "Springtime"]),
    ]


def test_parse_msd_from_bytes():
    parameters = list(msdio.parse_msd(b"#SUBTITLE:;\n#ARTIST:Kommisar;"))
    assert [p.value for p in parameters] == ["", "Kommisar"]


def test_parse_msd_from_stream():
    parameters = list(msdio.parse_msd(io.BytesIO(b"#A:B;")))
    assert parameters == [msdio.Parameter(["A", "B"])]


def test_parse_msd_options():
    contents = r"#A\:B:C\;D;"
    assert list(msdio.parse_msd(contents)) == [msdio.Parameter(["A:B", "C;D"])]
    assert list(msdio.parse_msd(contents, escapes=False, ignore_stray_text=True)) == [
        msdio.Parameter(["A\\", "B", "C\\"])
    ]


def test_read_file(tmp_path):
    test_file = tmp_path / "song.sm"
    contents = "\ufeff#TITLE:実例;\r\n#BPMS:0.000=120.000;\r\n"
    test_file.write_bytes(contents.encode("utf-8"))

    assert msdio.read(test_file) == [
        msdio.Parameter(["TITLE", "実例"]),
        msdio.Parameter(["BPMS", "0.000=120.000"]),
    ]
    assert msdio.read(str(test_file)) == msdio.read(test_file)


def test_read_raises_on_stray_text(tmp_path):
    test_file = tmp_path / "song.sm"
    test_file.write_bytes(b"#A:B;\noops\n#C:D;")

    with pytest.raises(msdio.StrayTextError, match="after 'A' parameter"):
        msdio.read(test_file)
    assert len(msdio.read(test_file, ignore_stray_text=True)) == 2


def test_lazy_read_closes_file(tmp_path):
    test_file = tmp_path / "song.sm"
    test_file.write_bytes(b"#A:B;\n#C:D;")

    with msdio.lazy_read(test_file) as parameters:
        assert next(parameters).key == "A"
        stream = parameters.tokens.stream
    assert stream.closed


def test_lazy_read_does_not_close_given_stream():
    stream = io.BytesIO(b"#A:B;")
    with msdio.lazy_read(stream) as parameters:
        assert list(parameters) == [msdio.Parameter(["A", "B"])]
    assert not stream.closed


def test_write_file(tmp_path):
    test_file = tmp_path / "song.sm"
    msdio.write(test_file, [("TITLE", "Spring:time"), msdio.Parameter(["NOTES"])])

    assert test_file.read_bytes() == b"#TITLE:Spring\\:time;\n#NOTES;\n"
    assert msdio.read(test_file) == [
        msdio.Parameter(["TITLE", "Spring:time"]),
        msdio.Parameter(["NOTES"]),
    ]


def test_write_keeps_line_terminators(tmp_path):
    test_file = tmp_path / "song.sm"
    msdio.write(str(test_file), [["NOTES", "\r\n0000\r\n"]])

    assert test_file.read_bytes() == b"#NOTES:\r\n0000\r\n;\n"


def test_write_file_given_by_keyword(tmp_path):
    test_file = tmp_path / "song.sm"
    msdio.write(filelike=test_file, parameters=[["TITLE", "Springtime"]])

    assert test_file.read_bytes() == b"#TITLE:Springtime;\n"


def test_write_without_escapes_errors():
    with pytest.raises(msdio.SerializeError):
        msdio.write(io.StringIO(), [["TITLE", "a;b"]], escapes=False)


@given(parameter_lists)
def test_write_read_with_escapes(components):
    stream = io.StringIO(newline="")
    msdio.write(stream, components)
    stream.seek(0)

    with warnings.catch_warnings():
        warnings.simplefilter("error", msdio.MSDWarning)
        assert [p.components for p in msdio.parse_msd(stream)] == components


@given(parameters(plain_components))
def test_write_read_without_escapes(components):
    stream = io.StringIO(newline="")
    msdio.write(stream, [components], escapes=False)

    parsed = list(msdio.parse_msd(stream.getvalue(), escapes=False))
    assert parsed == [msdio.Parameter(components)]
