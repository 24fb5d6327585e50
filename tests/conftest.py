"""
Shared fixtures: a small in-memory catalog and loaders that count their calls.
"""

import pytest

from app.core.models import Credit, Movie
from app.core.service import CatalogService


class CountingLoader:
    """Loader stand-in that returns fixed data and records how often it ran."""

    def __init__(self, data):
        self.data = data
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return list(self.data)


@pytest.fixture
def movies():
    """Five movies in catalog order, one with an unparseable release date."""
    return [
        Movie(id="603", title="The Matrix", original_title="The Matrix",
              overview="A hacker learns the truth.", release_date="1999-03-30",
              tagline="Welcome to the Real World.", vote_average="8.2"),
        Movie(id="27205", title="Inception", original_title="Inception",
              overview="Dreams within dreams.", release_date="2010-07-15",
              tagline="Your mind is the scene of the crime.", vote_average="8.4"),
        Movie(id="604", title="The Matrix Reloaded", original_title="The Matrix Reloaded",
              release_date="2003-05-15", vote_average="7.0"),
        Movie(id="862", title="Toy Story", original_title="Toy Story",
              release_date="1995-10-30", vote_average="7.9"),
        Movie(id="999", title="Lost Reel", release_date="unknown", vote_average="5.0"),
    ]


@pytest.fixture
def credits():
    """Credits for three of the movies; Toy Story and Lost Reel have none."""
    return [
        Credit.from_parts(
            "603",
            crew=[
                "Lana Wachowski (Director)",
                "Lilly Wachowski (Director)",
                "Lana Wachowski (Writer)",
                "Zach Staenberg (Editor)",
                "Bill Pope (Director of Photography)",
            ],
            cast=["Keanu Reeves", "Laurence Fishburne", "Carrie-Anne Moss"],
        ),
        Credit.from_parts(
            "27205",
            crew=[
                "Christopher Nolan (Director)",
                "Christopher Nolan (Screenplay)",
                "Lee Smith (Editor)",
            ],
            cast=["Leonardo DiCaprio", "Joseph Gordon-Levitt"],
        ),
        Credit.from_parts(
            "604",
            crew=["Lana Wachowski (Director)", "Geofrey Darrow (Animation)"],
            cast=["Keanu Reeves"],
        ),
    ]


@pytest.fixture
def movie_loader(movies):
    return CountingLoader(movies)


@pytest.fixture
def credit_loader(credits):
    return CountingLoader(credits)


@pytest.fixture
def service(movie_loader, credit_loader):
    """CatalogService over the fixture data."""
    return CatalogService(movie_loader=movie_loader, credit_loader=credit_loader)
