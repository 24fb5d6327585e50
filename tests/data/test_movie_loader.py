"""
Unit tests for loading the gzip JSON movie dataset.
"""

import gzip
import json

import pytest

from app.core.exceptions import DatasetError
from app.data.movie_loader import load_movies, movie_from_record


def _write_gz(path, payload):
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write(payload if isinstance(payload, str) else json.dumps(payload))
    return path


class TestMovieFromRecord:
    """Tests for movie_from_record()."""

    def test_camel_case_keys(self):
        movie = movie_from_record({
            "id": "603",
            "title": "The Matrix",
            "originalTitle": "The Matrix",
            "overview": "A hacker...",
            "releaseDate": "1999-03-30",
            "tagline": "Welcome to the Real World.",
            "voteAverage": "8.2",
        })
        assert movie.id == "603"
        assert movie.original_title == "The Matrix"
        assert movie.release_date == "1999-03-30"
        assert movie.vote_average == "8.2"
        assert movie.lower_title == "the matrix"

    def test_numeric_values_become_strings(self):
        movie = movie_from_record({"id": 603, "title": "The Matrix", "voteAverage": 8.2})
        assert movie.id == "603"
        assert movie.vote_average == "8.2"

    def test_missing_optional_fields(self):
        movie = movie_from_record({"id": "1"})
        assert movie.title is None
        assert movie.release_date is None

    def test_missing_id(self):
        with pytest.raises(DatasetError):
            movie_from_record({"title": "Nameless"})

    def test_not_an_object(self):
        with pytest.raises(DatasetError):
            movie_from_record(["603", "The Matrix"])


class TestLoadMovies:
    """Tests for load_movies()."""

    def test_load_in_file_order(self, tmp_path):
        path = _write_gz(tmp_path / "movies.json.gz", [
            {"id": "2", "title": "B", "releaseDate": "2001-01-01"},
            {"id": "1", "title": "A", "releaseDate": "1999-01-01"},
        ])
        movies = load_movies(str(path))
        assert [m.id for m in movies] == ["2", "1"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_movies(str(tmp_path / "nope.json.gz"))

    def test_not_an_array(self, tmp_path):
        path = _write_gz(tmp_path / "movies.json.gz", {"id": "1"})
        with pytest.raises(DatasetError):
            load_movies(str(path))

    def test_invalid_json(self, tmp_path):
        path = _write_gz(tmp_path / "movies.json.gz", "[{not json")
        with pytest.raises(DatasetError):
            load_movies(str(path))

    def test_not_gzip(self, tmp_path):
        path = tmp_path / "movies.json.gz"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(DatasetError):
            load_movies(str(path))

    def test_truncated_gzip(self, tmp_path):
        full = gzip.compress(json.dumps([{"id": str(i), "title": f"Movie {i}"} for i in range(50)]).encode("utf-8"))
        path = tmp_path / "movies.json.gz"
        path.write_bytes(full[: len(full) // 2])
        with pytest.raises(DatasetError):
            load_movies(str(path))

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "movies.json.gz"
        path.write_bytes(gzip.compress(b'[{"id":"1","title":"\xff\xfe"}]'))
        with pytest.raises(DatasetError):
            load_movies(str(path))
