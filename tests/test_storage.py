import pytest

from readadviser.storage import NoSavedPagesError, Page, Storage


def test_hash_of_empty_page_is_sha1_of_empty_input():
    assert Page("", "").hash() == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def test_hash_concatenates_url_and_user():
    expected = "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert Page("a", "bc").hash() == expected
    assert Page("ab", "c").hash() == expected


def test_hash_is_stable_and_hex():
    page = Page("https://example.com/article", "alice")
    first = page.hash()
    assert first == page.hash()
    assert len(first) == 40
    assert set(first) <= set("0123456789abcdef")


def test_hash_differs_between_users():
    url = "https://example.com/article"
    assert Page(url, "alice").hash() != Page(url, "bob").hash()


def test_no_saved_pages_message():
    assert str(NoSavedPagesError()) == "No saved pages"


def test_storage_is_abstract():
    with pytest.raises(TypeError):
        Storage()