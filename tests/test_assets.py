from pathlib import Path

from bs4 import BeautifulSoup

from mdpdf.assets import has_acceptable_protocol, process_src, qualify_img_sources


def img_sources(html: str) -> list:
    return [img.get("src") for img in BeautifulSoup(html, "html.parser").find_all("img")]


def test_acceptable_protocols() -> None:
    assert has_acceptable_protocol("https://example.com/a.png")
    assert has_acceptable_protocol("HTTP://example.com/a.png")
    assert not has_acceptable_protocol("images/a.png")
    assert not has_acceptable_protocol("ftp://example.com/a.png")


def test_relative_path_becomes_file_url(tmp_path: Path) -> None:
    expected = (tmp_path / "images" / "logo.png").resolve().as_uri()
    assert process_src("images/logo.png", tmp_path) == expected
    assert process_src("./images/../images/logo.png", tmp_path) == expected


def test_absolute_path_is_kept_absolute(tmp_path: Path) -> None:
    target = tmp_path / "abs.png"
    assert process_src(str(target), tmp_path / "elsewhere") == target.resolve().as_uri()


def test_percent_encoded_path(tmp_path: Path) -> None:
    assert process_src("my%20image.png", tmp_path) == (tmp_path / "my image.png").resolve().as_uri()


def test_remote_and_inline_sources_untouched(tmp_path: Path) -> None:
    for src in ("https://example.com/a.png", "data:image/png;base64,AAAA", "file:///tmp/x.png"):
        assert process_src(src, tmp_path) == src


def test_qualify_img_sources(tmp_path: Path) -> None:
    html = '<p><img src="pic.png" alt="pic"> <img alt="no source"> <img src="http://x.org/y.png"></p>'
    result = qualify_img_sources(html, tmp_path)
    assert img_sources(result) == [(tmp_path / "pic.png").resolve().as_uri(), None, "http://x.org/y.png"]
    assert 'alt="pic"' in result


def test_fragment_without_images_is_preserved(tmp_path: Path) -> None:
    html = "<p>Plain <em>text</em></p>"
    assert qualify_img_sources(html, tmp_path) == html
