"""
Tests for CharData and CharDataList.
"""
from charlm.services.char_data import CharData, CharDataList


class TestCharData:
    """Test suite for CharData."""

    def test_initialization(self):
        """Test new observation starts at count 1 with zero probabilities."""
        cd = CharData("a")

        assert cd.chr == "a"
        assert cd.count == 1
        assert cd.p == 0.0
        assert cd.cp == 0.0

    def test_str(self):
        """Test string form lists char, count, p and cp."""
        cd = CharData("x", count=2, p=0.5, cp=1.0)

        assert str(cd) == "(x 2 0.5 1.0)"


class TestCharDataList:
    """Test suite for CharDataList."""

    def test_empty(self):
        """Test empty list."""
        probs = CharDataList()

        assert len(probs) == 0
        assert probs.total() == 0
        assert probs.index_of("a") == -1
        assert probs.get("a") is None
        assert str(probs) == "()"

    def test_add_appends_in_encounter_order(self):
        """Test new characters go to the end of the list."""
        probs = CharDataList()
        probs.add("c")
        probs.add("a")
        probs.add("b")

        assert [cd.chr for cd in probs] == ["c", "a", "b"]
        assert probs.index_of("a") == 1

    def test_update_increments_count(self):
        """Test update increments an existing entry without reordering."""
        probs = CharDataList()
        probs.add("x")
        probs.add("y")
        probs.update("x")
        probs.update("x")

        assert probs.get("x").count == 3
        assert probs.get("y").count == 1
        assert [cd.chr for cd in probs] == ["x", "y"]
        assert probs.total() == 4

    def test_update_adds_missing(self):
        """Test update on an unseen character appends it."""
        probs = CharDataList()
        probs.update("z")

        assert len(probs) == 1
        assert probs[0].chr == "z"

    def test_to_array_is_a_copy(self):
        """Test to_array returns a new list of the same entries."""
        probs = CharDataList()
        probs.add("a")

        array = probs.to_array()
        array.append(CharData("b"))

        assert len(probs) == 1

    def test_str(self):
        """Test string form of the whole list."""
        probs = CharDataList()
        probs.add("a")
        probs.add(" ")

        assert str(probs) == "((a 1 0.0 0.0) (  1 0.0 0.0))"
