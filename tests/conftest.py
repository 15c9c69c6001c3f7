"""Shared test fixtures for fuzzbridge."""

import csv

import pytest


@pytest.fixture
def cities_csv(tmp_path):
    """Create a CSV with a column of city names, accents included."""
    path = tmp_path / "cities.csv"
    rows = [
        {"id": "1", "city": "New York"},
        {"id": "2", "city": "Newark"},
        {"id": "3", "city": "São Paulo"},
        {"id": "4", "city": "Zürich"},
        {"id": "5", "city": "Montréal"},
        {"id": "6", "city": ""},
        {"id": "7", "city": "York"},
    ]
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=rows[0].keys())
        writer.writeheader()
        writer.writerows(rows)
    return str(path)


@pytest.fixture
def string_pairs():
    """Source/target pairs exercising inserts, deletes, replaces and empties."""
    return [
        ("kitten", "sitting"),
        ("sitting", "kitten"),
        ("", ""),
        ("", "abc"),
        ("abc", ""),
        ("same", "same"),
        ("flaw", "lawn"),
        ("intention", "execution"),
        ("Zürich", "Zurich"),
        ("a", "b"),
        ("abcdef", "azced"),
        ("the quick brown fox", "quick brown the fox"),
    ]
