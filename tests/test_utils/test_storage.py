"""
Unit tests for storage helpers.
"""

import json
import os
import tempfile

import pytest
from src.models.food import FoodItem
from src.models.operation import Operation
from src.ranking.leaderboard import build_leaderboard
from src.ranking.rating_index import RatingIndex
from src.utils.storage import StorageManager, load_catalog, load_operations


def write_file(directory, name, content):
    path = os.path.join(directory, name)
    with open(path, 'w') as f:
        f.write(content)
    return path


def test_load_csv_catalog():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_file(tmpdir, "catalog.csv", "food,cuisine,rating\nsushi,japanese,19\nkimchi,korean,9\n")

        items = load_catalog(path)

        assert items == [
            FoodItem(name="sushi", cuisine="japanese", rating=19),
            FoodItem(name="kimchi", cuisine="korean", rating=9),
        ]
        assert type(items[0].rating) is int


def test_load_json_catalog():
    with tempfile.TemporaryDirectory() as tmpdir:
        records = [{"food": "moussaka", "cuisine": "greek", "rating": 20}]
        path = write_file(tmpdir, "catalog.json", json.dumps(records))

        assert load_catalog(path) == [FoodItem(name="moussaka", cuisine="greek", rating=20)]


def test_csv_catalog_keeps_names_as_text():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_file(tmpdir, "catalog.csv", "food,cuisine,rating\n007,1,5\n7,1,4\nNA,korean,3\nnull,korean,2\n")

        items = load_catalog(path)

        assert [i.name for i in items] == ["007", "7", "NA", "null"]
        assert [i.cuisine for i in items] == ["1", "1", "korean", "korean"]

        index = RatingIndex.from_items(items)
        index.change_rating("007", 9)
        assert index.highest_rated("1") == "007"
        assert index.highest_rated("korean") == "NA"


def test_json_catalog_keeps_names_as_text():
    with tempfile.TemporaryDirectory() as tmpdir:
        records = [
            {"food": "007", "cuisine": "1", "rating": 5},
            {"food": "NA", "cuisine": "korean", "rating": 3},
        ]
        path = write_file(tmpdir, "catalog.json", json.dumps(records))

        assert [i.name for i in load_catalog(path)] == ["007", "NA"]


def test_catalog_blank_name():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_file(tmpdir, "catalog.csv", "food,cuisine,rating\n ,korean,3\n")

        with pytest.raises(ValueError, match="empty fields"):
            load_catalog(path)


def test_catalog_missing_column():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_file(tmpdir, "catalog.csv", "food,cuisine\nsushi,japanese\n")

        with pytest.raises(ValueError, match="missing columns: rating"):
            load_catalog(path)


def test_catalog_bad_rating():
    with tempfile.TemporaryDirectory() as tmpdir:
        fractional = write_file(tmpdir, "a.csv", "food,cuisine,rating\nsushi,japanese,4.5\n")
        empty = write_file(tmpdir, "b.csv", "food,cuisine,rating\nsushi,japanese,\n")

        with pytest.raises(ValueError, match="non-integer rating"):
            load_catalog(fractional)
        with pytest.raises(ValueError, match="empty fields"):
            load_catalog(empty)


def test_load_operations_parallel_arrays():
    with tempfile.TemporaryDirectory() as tmpdir:
        script = {
            "operations": ["FoodRatings", "highestRated"],
            "arguments": [[["a"], ["x"], [1]], ["x"]],
        }
        path = write_file(tmpdir, "ops.json", json.dumps(script))

        operations = load_operations(path)

        assert [op.name for op in operations] == ["FoodRatings", "highestRated"]
        assert operations[1].args == ["x"]


def test_load_operations_records():
    with tempfile.TemporaryDirectory() as tmpdir:
        records = [{"operation": "changeRating", "arguments": ["a", 3]}]
        path = write_file(tmpdir, "ops.json", json.dumps(records))

        assert load_operations(path) == [Operation("changeRating", ["a", 3])]


def test_load_operations_malformed():
    with tempfile.TemporaryDirectory() as tmpdir:
        uneven = write_file(tmpdir, "a.json", json.dumps({"operations": ["highestRated"], "arguments": []}))
        broken = write_file(tmpdir, "b.json", "{not json")

        with pytest.raises(ValueError, match="argument lists"):
            load_operations(uneven)
        with pytest.raises(ValueError, match="Unreadable"):
            load_operations(broken)


def test_save_results():
    with tempfile.TemporaryDirectory() as tmpdir:
        storage = StorageManager(os.path.join(tmpdir, "out"))
        operations = [Operation("highestRated", ["x"])]

        path = storage.save_results(operations, ["a"])

        assert not os.path.exists(f"{path}.tmp")
        with open(path) as f:
            assert json.load(f) == {"operations": ["highestRated"], "results": ["a"]}


def test_export_leaderboard():
    with tempfile.TemporaryDirectory() as tmpdir:
        storage = StorageManager(tmpdir)
        index = RatingIndex(foods=["b", "a"], cuisines=["x", "x"], ratings=[5, 5])

        path = storage.export_leaderboard(build_leaderboard(index))

        with open(path) as f:
            lines = f.read().splitlines()
        assert lines == ["Cuisine,Rank,Food,Rating", "x,1,a,5", "x,2,b,5"]
