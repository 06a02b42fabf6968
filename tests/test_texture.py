import pytest

from scopview.texture import PpmImage, TextureError, load_ppm, parse_ppm


TOP_ROW = [255, 0, 0, 0, 255, 0]
BOTTOM_ROW = [0, 0, 255, 255, 255, 255]


def _ppm(rows, width=2, height=2, max_value=255, magic="P3"):
    body = "\n".join(" ".join(str(v) for v in row) for row in rows)
    return f"{magic}\n{width} {height}\n{max_value}\n{body}\n"


def test_parse_flips_rows():
    image = parse_ppm(_ppm([TOP_ROW, BOTTOM_ROW]))
    assert image == PpmImage(2, 2, bytes(BOTTOM_ROW + TOP_ROW))


def test_parse_scales_to_full_byte_range():
    image = parse_ppm(_ppm([[0, 1, 0]], width=1, height=1, max_value=1))
    assert image.data == bytes([0, 255, 0])


def test_parse_ignores_comments():
    text = "P3 # plain ppm\n# size follows\n2 2\n255 # max\n" + " ".join(
        str(v) for v in TOP_ROW + BOTTOM_ROW
    )
    assert parse_ppm(text).data == bytes(BOTTOM_ROW + TOP_ROW)


def test_missing_samples_stay_zero():
    image = parse_ppm(_ppm([TOP_ROW]))
    assert len(image.data) == 2 * 2 * 3
    assert image.data[len(TOP_ROW):] == bytes(TOP_ROW)
    assert not any(image.data[: len(TOP_ROW)])


def test_raw_format_is_unsupported():
    with pytest.raises(TextureError):
        parse_ppm(_ppm([TOP_ROW, BOTTOM_ROW], magic="P6"))


def test_unknown_format_raises():
    with pytest.raises(TextureError):
        parse_ppm(_ppm([TOP_ROW, BOTTOM_ROW], magic="P9"))


def test_empty_text_raises():
    with pytest.raises(TextureError):
        parse_ppm("   # only a comment\n")


@pytest.mark.parametrize(
    "text",
    ["P3\n0 2\n255\n", "P3\n2 abc\n255\n", "P3\n2 2\n", "P3\n2 2\n-1\n", "P3\n-2 2\n255\n"],
)
def test_bad_header_raises(text):
    with pytest.raises(TextureError):
        parse_ppm(text)


def test_too_many_samples_raises():
    with pytest.raises(TextureError):
        parse_ppm(_ppm([TOP_ROW, BOTTOM_ROW, TOP_ROW]))


def test_load_ppm_from_file(tmp_path):
    path = tmp_path / "image.ppm"
    path.write_text(_ppm([TOP_ROW, BOTTOM_ROW]), encoding="ascii")
    image = load_ppm(path)
    assert (image.width, image.height) == (2, 2)
    assert image.data == bytes(BOTTOM_ROW + TOP_ROW)


def test_load_ppm_missing_file_raises(tmp_path):
    with pytest.raises(TextureError):
        load_ppm(tmp_path / "missing.ppm")