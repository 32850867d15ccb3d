import pytest
from signup.services.registration.sanitizer import sanitize, sanitize_text


class TestSanitizeText:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("  John  ", "John"),
            ("<script>alert(1)</script>", "scriptalert(1)/script"),
            ("a<b>c", "abc"),
            ("  < padded >  ", "padded"),
            ("<>", ""),
            ("", ""),
        ],
    )
    def test_trims_and_strips_angle_brackets(self, raw, expected):
        assert sanitize_text(raw) == expected

    @pytest.mark.parametrize("raw", ["< a", " x> ", "<<  >>", "\t<b>bold</b>\n", "plain"])
    def test_is_idempotent(self, raw):
        once = sanitize_text(raw)
        assert sanitize_text(once) == once


class TestSanitize:
    def test_strings_lists_and_other_values(self):
        data = {
            "first_name": "  <Jane> ",
            "interests": [" music ", "<travel>", 3, None],
            "terms": True,
            "age": 42,
            "nested": {"k": " v "},
        }

        out = sanitize(data)

        assert out == {
            "first_name": "Jane",
            "interests": ["music", "travel", 3, None],
            "terms": True,
            "age": 42,
            "nested": {"k": " v "},
        }

    def test_keys_are_neither_added_nor_removed(self):
        data = {"a": " x ", "b": None, "c": []}
        assert set(sanitize(data)) == set(data)

    def test_does_not_mutate_input(self):
        interests = [" music "]
        data = {"interests": interests, "city": " Pune "}

        sanitize(data)

        assert interests == [" music "]
        assert data["city"] == " Pune "

    def test_idempotent_over_whole_mapping(self):
        data = {"bio": " <b>hi</b> ", "interests": ["< sports", 1], "terms": "on"}
        once = sanitize(data)
        assert sanitize(once) == once

    def test_empty_mapping(self):
        assert sanitize({}) == {}
