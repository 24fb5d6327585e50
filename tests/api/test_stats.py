"""
API tests for GET /stats.
"""


class TestStatsEndpoint:
    """Tests for GET /stats."""

    def test_stats_for_query(self, client):
        r = client.get("/stats?q=matrix")
        assert r.status_code == 200
        data = r.json()
        assert data["matchedMovies"] == 2
        assert data["roles"] == {
            "Director": 3,
            "Writer": 1,
            "Screenplay": 0,
            "Editor": 1,
            "Animation": 1,
            "Other": 1,
        }
        assert data["totalCrew"] == 7

    def test_stats_whole_catalog(self, client):
        data = client.get("/stats").json()
        assert data["matchedMovies"] == 5
        assert data["totalCrew"] == sum(data["roles"].values()) == 10

    def test_stats_no_match(self, client):
        data = client.get("/stats?q=nothing-like-this").json()
        assert data["matchedMovies"] == 0
        assert data["totalCrew"] == 0
