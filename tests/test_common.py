import pytest

from sgftree.common import coordinate_offset


class TestCoordinateOffset:
    @pytest.mark.parametrize(
        ("letter", "offset"),
        [("a", 0), ("s", 18), ("z", 25), ("A", 26), ("Z", 51)],
    )
    def test_letters(self, letter: str, offset: int) -> None:
        assert coordinate_offset(letter) == offset

    @pytest.mark.parametrize("bad", ["", "1", "[", "ab", "é"])
    def test_invalid(self, bad: str) -> None:
        with pytest.raises(ValueError, match="invalid coordinate"):
            coordinate_offset(bad)
