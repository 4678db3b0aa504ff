from devevent.utils.slug import is_valid_slug, next_available_slug, slugify


def test_slugify_title():
    assert slugify("React Summit 2025!") == "react-summit-2025"


def test_slugify_collapses_separators():
    assert slugify("  Node.js  &  Deno -- Meetup ") == "node-js-deno-meetup"


def test_slugify_drops_everything_unsafe():
    assert slugify("!!!") == ""


def test_is_valid_slug():
    assert is_valid_slug("devops-days-2025")
    assert not is_valid_slug("not_a_valid_slug!")
    assert not is_valid_slug("Upper-Case")
    assert not is_valid_slug("")


def test_is_valid_slug_rejects_trailing_newline():
    assert not is_valid_slug("abc\n")
    assert not is_valid_slug("\nabc")


def test_next_available_slug():
    assert next_available_slug("pycon", set()) == "pycon"
    assert next_available_slug("pycon", {"pycon"}) == "pycon-2"
    assert next_available_slug("pycon", {"pycon", "pycon-2", "pycon-3"}) == "pycon-4"
