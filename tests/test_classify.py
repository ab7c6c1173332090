import pytest
from letterbox.classify import all_letters, classify

def test_each_letter_maps_to_its_group():
    mapping = classify(["ABC", "DEF", "GHI", "JKL"])
    assert len(mapping) == 12
    assert mapping["A"] == 0 and mapping["C"] == 0
    assert mapping["E"] == 1
    assert mapping["G"] == 2
    assert mapping["L"] == 3

def test_overlapping_letter_keeps_first_group():
    mapping = classify(["ABC", "DAF", "GHI", "JKA"])
    assert mapping["A"] == 0
    assert set(mapping.values()) == {0, 1, 2, 3}

def test_lowercase_input_is_uppercased():
    mapping = classify(["abc", "def", "ghi", "jkl"])
    assert mapping["B"] == 0
    assert "b" not in mapping

def test_classification_is_read_only():
    mapping = classify(["ABC", "DEF", "GHI", "JKL"])
    with pytest.raises(TypeError):
        mapping["Z"] = 0

def test_all_letters_first_seen_order():
    assert all_letters(["ABC", "DEF", "GHI", "JKL"]) == list("ABCDEFGHIJKL")
    assert all_letters(["ABC", "CDE", "FGH", "IJK"]) == list("ABCDEFGHIJK")
