import pytest

from matrixnodes import InvalidConfiguration
from matrixnodes.tag_map import TagMap, parse_tag_index_name


class TestParsing():

    @pytest.mark.parametrize("definition,expected", [
        ("input_matrix", ('', None, "input_matrix")),
        ("MINUEND:input_matrix", ("MINUEND", None, "input_matrix")),
        ("SUBTRAHEND:side_matrix", ("SUBTRAHEND", None, "side_matrix")),
        ("MINUEND:2:input_matrix", ("MINUEND", 2, "input_matrix")),
        ("A_1:x", ("A_1", None, "x")),
    ])
    def test_valid(self, definition, expected):
        assert parse_tag_index_name(definition) == expected

    @pytest.mark.parametrize("definition", [
        "",
        "Input",
        "minuend:input",
        "MINUEND:",
        "MINUEND:-1:x",
        "MINUEND:01:x",
        "A:0:x:y",
        "1A:x",
        None,
    ])
    def test_invalid(self, definition):
        with pytest.raises(InvalidConfiguration):
            parse_tag_index_name(definition)


class TestTagMap():

    def test_ids_sorted_by_tag(self):
        tm = TagMap(["SUBTRAHEND:b", "MINUEND:a", "c"])

        assert len(tm) == 3
        assert tm.get_id('', 0) == 0
        assert tm.get_id("MINUEND") == 1
        assert tm.get_id("SUBTRAHEND") == 2
        assert tm.entry(1).name == "a"

    def test_implicit_indices(self):
        tm = TagMap(["x", "y", "DATA:a", "DATA:b"])

        assert tm.num_entries() == 4
        assert tm.num_entries("DATA") == 2
        assert tm.num_entries('') == 2
        assert tm.entry(tm.get_id("DATA", 1)).name == "b"
        assert tm.entry(tm.get_id('', 1)).name == "y"

    def test_has_tag(self):
        tm = TagMap(["MINUEND:a"])
        assert tm.has_tag("MINUEND")
        assert not tm.has_tag("SUBTRAHEND")
        assert not tm.has_tag('')

    def test_missing_id(self):
        tm = TagMap(["MINUEND:a"])
        with pytest.raises(InvalidConfiguration):
            tm.get_id("MINUEND", 1)

    @pytest.mark.parametrize("definitions", [
        ["DATA:0:a", "DATA:0:b"],
        ["DATA:1:a"],
        ["DATA:0:a", "DATA:2:b"],
        ["DATA:a", "DATA:0:b"],
    ])
    def test_bad_indices(self, definitions):
        with pytest.raises(InvalidConfiguration, match="contiguous"):
            TagMap(definitions)

    def test_empty(self):
        tm = TagMap()
        assert tm.num_entries() == 0
        assert tm.tags() == []
        assert tm.names() == []
