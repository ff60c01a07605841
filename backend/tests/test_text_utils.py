from app.utils.fields import field_url, relation_id
from app.utils.text_utils import auto_excerpt, excerpt_by_line_breaks, strip_tags


def test_strip_tags():
    assert strip_tags("<p>Hello <b>world</b></p>\n<p>again</p>") == "Hello world again"
    assert strip_tags("") == ""


def test_auto_excerpt_cuts_long_text():
    body = "<p>" + " ".join(f"w{i}" for i in range(60)) + "</p>"
    excerpt = auto_excerpt(body, words=55)
    assert excerpt.endswith("…")
    assert excerpt[:-1].split(" ") == [f"w{i}" for i in range(55)]


def test_auto_excerpt_keeps_short_text():
    assert auto_excerpt("<p>Just a few words</p>") == "Just a few words"


def test_excerpt_by_line_breaks():
    body = "<p>line one<br>line two<br />line three<br>line four</p>"
    assert excerpt_by_line_breaks(body, 3) == "line one<br>line two<br>line three"


def test_excerpt_by_line_breaks_plain_newlines():
    assert excerpt_by_line_breaks("first\nsecond", 3) == "first<br>second"
    assert excerpt_by_line_breaks("", 3) == ""


def test_relation_id_shapes():
    assert relation_id(12) == 12
    assert relation_id("12") == 12
    assert relation_id({"ID": 12, "post_title": "x"}) == 12
    assert relation_id({"id": "5"}) == 5
    assert relation_id([7, 8]) == 7
    assert relation_id([]) is None
    assert relation_id(0) is None
    assert relation_id("abc") is None
    assert relation_id(False) is None
    assert relation_id(None) is None


def test_field_url():
    assert field_url({"url": "https://x/y.pdf", "id": 3}) == "https://x/y.pdf"
    assert field_url("https://x/y.pdf") == "https://x/y.pdf"
    assert field_url(None) == ""
    assert field_url({"id": 3}) == ""
    assert field_url(False) == ""
