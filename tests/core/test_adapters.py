from __future__ import annotations

import pytest

from nonempty.config import Config
from nonempty.core import (EMPTY_SELECTION, concat, create, extract_range,
                           nonempty, read, substr, write)
from nonempty.errors import NonEmptyError, Violation


# indexed read


def test_read_single_index() -> None:
    x = nonempty([2, 4, 6])
    assert read(x, 0).unwrap() == 2
    assert x[1] == nonempty(4)
    assert x[-1] == nonempty(6)


def test_read_slices_and_index_lists_keep_container_type() -> None:
    assert nonempty([2, 4, 6])[0:2] == nonempty([2, 4])
    assert read(nonempty([2, 4, 6]), [0, 2]) == nonempty([2, 6])
    assert read(nonempty((1, 2, 3)), [0, 1]) == nonempty((1, 2))
    assert read(nonempty("path"), slice(0, 2)) == nonempty("pa")


def test_read_boolean_mask() -> None:
    x = nonempty([2, 4, 6])
    assert read(x, [True, False, True]) == nonempty([2, 6])
    with pytest.raises(NonEmptyError) as exc:
        read(x, [False, False, False])
    assert exc.value.violations == (Violation.ZERO_LENGTH,)
    with pytest.raises(IndexError):
        read(x, [True, False])


def test_read_predicate() -> None:
    x = nonempty([2, 4, 6])
    assert read(x, lambda v: v > 3) == nonempty([4, 6])
    with pytest.raises(NonEmptyError):
        read(x, lambda v: v > 10)


def test_read_empty_selection_fails() -> None:
    with pytest.raises(NonEmptyError) as exc:
        read(nonempty([2, 4, 6]), EMPTY_SELECTION)
    assert exc.value.violations == (Violation.ZERO_LENGTH,)
    with pytest.raises(NonEmptyError):
        read(nonempty([2, 4, 6]), [])


def test_read_blank_text_fails() -> None:
    with pytest.raises(NonEmptyError) as exc:
        read(nonempty(["a", "", "b"]), 1)
    assert exc.value.violations == (Violation.ZERO_LENGTH, Violation.ALL_BLANK)
    with pytest.raises(NonEmptyError) as exc:
        nonempty("a b")[1]
    assert exc.value.violations == (Violation.ALL_BLANK,)


def test_read_mapping() -> None:
    x = nonempty({"a": 1, "b": 2})
    assert read(x, "b") == nonempty(2)
    assert read(x, ["a"]) == nonempty({"a": 1})
    with pytest.raises(NonEmptyError):
        read(x, EMPTY_SELECTION)


def test_read_two_dimensional_nested_lists() -> None:
    grid = nonempty([[1, 2, 3], [4, 5, 6]])
    assert grid[0, 1] == nonempty(2)
    assert grid[:, 0] == nonempty([1, 4])
    assert read(grid, [1], [0, 2]) == nonempty([[4, 6]])


def test_mapping_of_columns() -> None:
    table = nonempty({"a": [1, 2], "b": [3]})
    assert table["a", 1] == nonempty(2)
    assert write(table, "b", 0, 0) == nonempty({"a": [1, 2], "b": [0]})
    assert table == nonempty({"a": [1, 2], "b": [3]})
    with pytest.raises(NonEmptyError):
        read(table, "a", [])


def test_scalar_reads_as_one_element() -> None:
    x = read(nonempty([2, 4, 6]), 0)
    assert read(x, 0) == nonempty(2)
    assert read(x, -1) == nonempty(2)
    assert read(x, slice(None)) == nonempty(2)
    assert read(x, [0, 0]) == nonempty([2, 2])
    with pytest.raises(IndexError):
        read(x, 1)


def test_scalar_empty_selection_fails() -> None:
    with pytest.raises(NonEmptyError) as exc:
        read(nonempty(2), EMPTY_SELECTION)
    assert exc.value.violations == (Violation.ZERO_LENGTH,)
    with pytest.raises(NonEmptyError):
        read(nonempty(2), [False])


def test_read_out_of_bounds_propagates() -> None:
    with pytest.raises(IndexError):
        read(nonempty([1]), 3)


# indexed write


def test_emptying_write_fails_without_mutation() -> None:
    a = nonempty(["path/to/data"])
    with pytest.raises(NonEmptyError) as exc:
        write(a, 0, "")
    assert exc.value.violations == (Violation.ALL_BLANK,)
    assert a.unwrap() == ["path/to/data"]


def test_write_blank_over_all_positions_fails() -> None:
    with pytest.raises(NonEmptyError) as exc:
        write(nonempty("path/to/data"), slice(None), "")
    assert exc.value.violations == (Violation.ZERO_LENGTH, Violation.ALL_BLANK)

    with pytest.raises(NonEmptyError) as exc:
        write(nonempty(["a", "b"]), slice(None), " ")
    assert exc.value.violations == (Violation.ALL_BLANK,)

    with pytest.raises(NonEmptyError) as exc:
        write(nonempty([1, 2]), slice(None), [])
    assert exc.value.violations == (Violation.ZERO_LENGTH,)


def test_write_returns_new_instance() -> None:
    x = nonempty(["a", "b"])
    y = write(x, 0, "")
    assert y == nonempty(["", "b"])
    assert x == nonempty(["a", "b"])


def test_read_then_write_back_is_identity() -> None:
    x = nonempty([2, 4, 6])
    for i in range(3):
        assert write(x, i, read(x, i)) == x


def test_scalar_read_then_write_back_is_identity() -> None:
    x = read(nonempty([2, 4, 6]), 0)
    assert write(x, 0, read(x, 0)) == x
    assert write(x, 0, 5) == nonempty(5)
    assert write(x, slice(None), 7) == nonempty(7)
    with pytest.raises(NonEmptyError) as exc:
        write(x, slice(None), [])
    assert exc.value.violations == (Violation.ZERO_LENGTH,)


def test_blanking_a_single_text_fails_without_mutation() -> None:
    # A str payload is one text element, so a blank write anywhere blanks it.
    a = create("path/to/data")
    with pytest.raises(NonEmptyError) as exc:
        write(a, 1, "")
    assert Violation.ALL_BLANK in exc.value.violations
    with pytest.raises(NonEmptyError) as exc:
        write(a, 0, " ")
    assert exc.value.violations == (Violation.ALL_BLANK,)
    assert a.unwrap() == "path/to/data"


def test_blank_write_respects_config() -> None:
    a = nonempty("path")
    assert write(a, 1, " ", config=Config(strip=False)) == nonempty("p th")
    with pytest.raises(IndexError):
        write(a, 10, "")


def test_write_non_text_into_text_fails() -> None:
    with pytest.raises(TypeError):
        write(nonempty("abc"), 0, 5)
    with pytest.raises(TypeError):
        write(nonempty("abc"), 0, "x", 1)


def test_write_index_lists_and_masks() -> None:
    x = nonempty([1, 2, 3])
    assert write(x, [0, 2], 0) == nonempty([0, 2, 0])
    assert write(x, [0, 2], [7, 9]) == nonempty([7, 2, 9])
    assert write(x, [True, False, False], 9) == nonempty([9, 2, 3])
    with pytest.raises(ValueError):
        write(x, [0, 2], [1, 2, 3])


def test_write_strings_tuples_and_mappings() -> None:
    assert write(nonempty("path"), slice(0, 2), "XY") == nonempty("XYth")
    assert write(nonempty("path"), 0, "b") == nonempty("bath")
    assert write(nonempty((1, 2)), 0, 5) == nonempty((5, 2))
    assert write(nonempty({"a": 1}), "b", 2) == nonempty({"a": 1, "b": 2})


def test_write_two_dimensional_nested_lists() -> None:
    grid = nonempty([[1, 2, 3], [4, 5, 6]])
    assert write(grid, 0, 9, 1) == nonempty([[1, 9, 3], [4, 5, 6]])
    assert write(grid, slice(None), 0, 0) == nonempty([[0, 2, 3], [0, 5, 6]])
    assert grid == nonempty([[1, 2, 3], [4, 5, 6]])


def test_write_empty_selection_is_noop() -> None:
    x = nonempty([1, 2])
    assert write(x, EMPTY_SELECTION, 0) == x


# concatenation


def test_concat_preserves_order_and_content() -> None:
    x, y = nonempty([1, 2]), nonempty([3])
    assert concat(x, y).unwrap() == x.unwrap() + y.unwrap()
    assert concat(nonempty(["a"]), nonempty(["b"])) == nonempty(["a", "b"])


def test_concat_text_and_tuples() -> None:
    assert concat(nonempty("ab"), nonempty("cd")) == nonempty("abcd")
    assert concat(nonempty((1,)), nonempty((2,))) == nonempty((1, 2))


def test_concat_scalars_and_plain_values() -> None:
    assert concat(nonempty(1), nonempty([2, 3]), 4) == nonempty([1, 2, 3, 4])
    assert concat(nonempty("a"), [" "]) == nonempty(["a", " "])
    assert concat(nonempty([1]), []) == nonempty([1])


def test_concat_single_argument() -> None:
    assert concat(nonempty([1])) == nonempty([1])


# substring extraction


def test_extract_range_from_string() -> None:
    assert extract_range(nonempty("path/to/data"), 0, 4) == nonempty("path")


def test_extract_range_from_character_vector() -> None:
    assert substr(nonempty(["hello", "world"]), 1, 3) == nonempty(["el", "or"])
    assert substr(nonempty(("abc",)), 0, 1) == nonempty(("a",))


def test_extract_zero_width_range_fails() -> None:
    with pytest.raises(NonEmptyError) as exc:
        extract_range(nonempty("abc"), 1, 1)
    assert exc.value.violations == (Violation.ZERO_LENGTH, Violation.ALL_BLANK)


def test_extract_out_of_bounds_range_fails() -> None:
    x = nonempty(["ab", "cd"])
    with pytest.raises(NonEmptyError) as exc:
        extract_range(x, 5, 9)
    assert exc.value.violations == (Violation.ALL_BLANK,)
    assert x == nonempty(["ab", "cd"])


def test_extract_blank_range_fails() -> None:
    with pytest.raises(NonEmptyError) as exc:
        extract_range(nonempty("a bc"), 1, 2)
    assert exc.value.violations == (Violation.ALL_BLANK,)


def test_extract_range_requires_text() -> None:
    with pytest.raises(TypeError):
        extract_range(nonempty([1, 2]), 0, 1)
