import pytest

from dotgraph.attrs import concat, freeze_attrs, merge_attrs
from dotgraph.errors import DotGraphError, MalformedAttributeError


class TestMergeAttrs:
    def test_keys_not_mentioned_keep_their_value(self):
        merged = merge_attrs({"color": "red", "shape": "box"}, [("shape", "circle")])
        assert merged == {"color": "red", "shape": "circle"}

    def test_last_occurrence_wins_within_one_call(self):
        merged = merge_attrs({}, [("label", "a"), ("width", "2"), ("label", "b")])
        assert merged == {"label": "b", "width": "2"}

    def test_added_pairs_override_existing_values(self):
        merged = merge_attrs({"label": "old"}, [("label", "new"), ("label", "newest")])
        assert merged["label"] == "newest"

    def test_empty_pairs_return_equal_mapping(self):
        original = {"a": "1"}
        merged = merge_attrs(original, [])
        assert merged == original
        assert merged is not original

    def test_input_mapping_is_untouched(self):
        original = {"a": "1"}
        merge_attrs(original, [("a", "2"), ("b", "3")])
        assert original == {"a": "1"}

    def test_accepts_mapping_of_additions(self):
        merged = merge_attrs({"a": "1"}, {"b": "2", "a": "3"})
        assert merged == {"a": "3", "b": "2"}

    def test_accepts_generator_of_pairs(self):
        merged = merge_attrs({}, ((str(i), str(i * i)) for i in range(3)))
        assert merged == {"0": "0", "1": "1", "2": "4"}

    def test_non_conflicting_order_does_not_matter(self):
        first = merge_attrs({"x": "0"}, [("a", "1"), ("b", "2")])
        second = merge_attrs({"x": "0"}, [("b", "2"), ("a", "1")])
        assert first == second

    @pytest.mark.parametrize(
        "pair",
        [
            ("only-key",),
            ("k", "v", "extra"),
            "ab",
            42,
            ("k", 5),
            (None, "v"),
        ],
    )
    def test_malformed_pairs_are_rejected(self, pair):
        with pytest.raises(MalformedAttributeError) as exc_info:
            merge_attrs({}, [pair])
        assert exc_info.value.pair == pair
        assert isinstance(exc_info.value, DotGraphError)
        assert isinstance(exc_info.value, ValueError)


def test_freeze_attrs_is_read_only_copy():
    source = {"a": "1"}
    frozen = freeze_attrs(source)
    source["a"] = "changed"

    assert frozen == {"a": "1"}
    with pytest.raises(TypeError):
        frozen["b"] = "2"  # type: ignore[index]


def test_freeze_attrs_of_nothing_is_empty():
    assert freeze_attrs(None) == {}
    assert freeze_attrs({}) == {}


def test_concat_preserves_order_and_duplicates():
    assert concat(("a", "b"), ["b", "c"]) == ("a", "b", "b", "c")
    assert concat((), []) == ()


def test_frozen_attrs_are_reused_not_recopied():
    frozen = freeze_attrs({"a": "1"})
    assert freeze_attrs(frozen) is frozen
    assert repr(frozen) == "FrozenAttrs({'a': '1'})"
