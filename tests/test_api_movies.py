"""Tests for movies API endpoints."""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from conftest import make_movie
from razzies.api.app import create_app
from razzies.config import Settings


def create_test_client(movies, **kwargs):
    """Create app serving the given movies and return a client."""
    app = create_app(settings=Settings(), records=movies)
    return TestClient(app, **kwargs)


@pytest.fixture
def client(sample_movies):
    return create_test_client(sample_movies)


class TestListMoviesEndpoint:
    """Test GET /api/movies."""

    def test_returns_page_shape(self, client):
        """Response has total/page/perPage/items."""
        response = client.get("/api/movies")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 6
        assert data["page"] == 1
        assert data["perPage"] == 50
        assert len(data["items"]) == 6

    def test_item_shape(self, client):
        """Items expose studios and producers as lists."""
        data = client.get("/api/movies", params={"year": 2015, "winner": "true"}).json()
        assert data["items"] == [
            {
                "year": 2015,
                "title": "Fantastic Four",
                "studios": ["Some Studio"],
                "producers": ["Simon Kinberg", "Matthew Vaughn", "Hutch Parker"],
                "winner": True,
            }
        ]

    @pytest.mark.parametrize("value,expected", [("true", 4), ("YES", 4), ("1", 4), ("false", 2), (" no ", 2), ("0", 2)])
    def test_winner_values(self, client, value, expected):
        """Accepted true/false spellings filter accordingly."""
        data = client.get("/api/movies", params={"winner": value}).json()
        assert data["total"] == expected

    def test_year_filter(self, client):
        """year filters to exact matches."""
        data = client.get("/api/movies", params={"year": "1990"}).json()
        assert [m["title"] for m in data["items"]] == ["Rocky V", "The Adventures of Ford Fairlane"]

    def test_pagination(self, client):
        """page and perPage select the slice."""
        data = client.get("/api/movies", params={"page": 2, "perPage": 4}).json()
        assert data["total"] == 6
        assert (data["page"], data["perPage"]) == (2, 4)
        assert [m["title"] for m in data["items"]] == ["Fantastic Four", "Fifty Shades of Grey"]

    def test_page_past_end(self, client):
        """Out-of-range page is empty, not an error."""
        response = client.get("/api/movies", params={"page": 10})
        assert response.status_code == 200
        assert response.json()["items"] == []
        assert response.json()["total"] == 6

    @pytest.mark.parametrize(
        "params,parameter",
        [
            ({"winner": "maybe"}, "winner"),
            ({"year": "abc"}, "year"),
            ({"year": "1899"}, "year"),
            ({"page": "0"}, "page"),
            ({"page": "-3"}, "page"),
            ({"perPage": "x"}, "perPage"),
            ({"perPage": "51"}, "perPage"),
        ],
    )
    def test_invalid_parameters_return_400(self, client, params, parameter):
        """Bad query parameters are rejected with an error body."""
        response = client.get("/api/movies", params=params)
        assert response.status_code == 400

        data = response.json()
        assert data["name"] == "InvalidQueryParameterError"
        assert parameter in data["message"]

    @pytest.mark.parametrize(
        "params",
        [
            {"perPage": "2_000"},
            {"page": "1_0"},
            {"year": "١٩٩٠"},
            {"year": "１９９０"},
            {"page": "1.5"},
        ],
    )
    def test_non_ascii_and_underscored_integers_rejected(self, client, params):
        """Only plain ASCII digits count as integers."""
        response = client.get("/api/movies", params=params)
        assert response.status_code == 400
        assert response.json()["name"] == "InvalidQueryParameterError"

    @pytest.mark.parametrize("year", ["1990.0", " 1990 ", "+1990", "1990."])
    def test_integer_spellings_accepted(self, client, year):
        """A zero fraction, a sign and surrounding blanks are tolerated."""
        response = client.get("/api/movies", params={"year": year})
        assert response.status_code == 200
        assert response.json()["total"] == 2

    def test_zero_fraction_page(self, client):
        """page=2.0 is page 2."""
        data = client.get("/api/movies", params={"page": "2.0", "perPage": "4.00"}).json()
        assert (data["page"], data["perPage"]) == (2, 4)


class TestProducerIntervalsEndpoint:
    """Test GET /api/movies/producers/intervals."""

    def test_returns_min_and_max(self, client):
        """Shortest and longest intervals in camelCase."""
        response = client.get("/api/movies/producers/intervals")
        assert response.status_code == 200
        assert response.json() == {
            "min": [{"producer": "Joel Silver", "interval": 1, "previousWin": 1990, "followingWin": 1991}],
            "max": [{"producer": "Matthew Vaughn", "interval": 13, "previousWin": 2002, "followingWin": 2015}],
        }

    def test_empty_catalogue(self):
        """No winners gives empty lists."""
        client = create_test_client([make_movie(2000, "Loser")])
        assert client.get("/api/movies/producers/intervals").json() == {"min": [], "max": []}


class TestAppPlumbing:
    """Test health, request ids and error mapping."""

    def test_health(self, client):
        """Health reports the catalogue size."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "movies": 6}

    def test_request_id_echoed(self, client):
        """A caller-provided request id is returned."""
        response = client.get("/health", headers={"x-request-id": "abc-123"})
        assert response.headers["x-request-id"] == "abc-123"

    def test_request_id_generated(self, client):
        """Without a request id header one is generated."""
        response = client.get("/health")
        assert len(response.headers["x-request-id"]) == 36

    def test_unknown_route_error_shape(self, client):
        """404s use the error body shape."""
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"name": "Not Found", "message": "Not Found"}

    @pytest.fixture
    def broken_client(self, sample_movies):
        """Client whose catalogue fails on the winner query."""
        client = create_test_client(sample_movies)

        def broken():
            raise RuntimeError("boom")

        client.app.state.catalogue.find_winner_movies = broken
        return client

    def test_unhandled_error_returns_500(self, broken_client):
        """Unexpected exceptions become a generic 500 body."""
        response = broken_client.get("/api/movies/producers/intervals")
        assert response.status_code == 500
        assert response.json() == {"name": "INTERNAL_SERVER_ERROR", "message": "Internal server error"}

    def test_unhandled_error_keeps_request_id(self, broken_client):
        """The 500 response still echoes the request id."""
        response = broken_client.get(
            "/api/movies/producers/intervals", headers={"x-request-id": "req-500"}
        )
        assert response.headers["x-request-id"] == "req-500"

    def test_unhandled_error_logged_once_and_completed(self, broken_client, caplog):
        """One error record with the traceback, then the completion record."""
        with caplog.at_level(logging.INFO, logger="razzies.api.middleware"):
            broken_client.get("/api/movies/producers/intervals")

        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert [r.getMessage() for r in errors] == ["Unhandled error"]
        assert errors[0].exc_info is not None

        completed = [r for r in caplog.records if r.getMessage() == "Request completed"]
        assert len(completed) == 1
        assert completed[0].status == 500

    def test_routes_module_imports_on_its_own(self):
        """The movies router can be imported before the app module."""
        src = Path(__file__).parent.parent / "src"
        env = {**os.environ, "PYTHONPATH": os.pathsep.join([str(src), os.environ.get("PYTHONPATH", "")])}
        result = subprocess.run(
            [sys.executable, "-c", "import razzies.api.routes.movies as m; print(len(m.router.routes))"],
            capture_output=True,
            text=True,
            env=env,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "2"


class TestStartupLoading:
    """Test catalogue loading through the app lifespan."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        """Startup reconfigures the root logger; put it back afterwards."""
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers = handlers
        root.setLevel(level)

    def test_loads_csv_on_startup(self, tmp_path):
        """Without explicit records, the CSV is loaded at startup."""
        csv_path = tmp_path / "movielist.csv"
        csv_path.write_text(
            "year;title;studios;producers;winner\n"
            "2002;Swept Away;Screen Gems;Matthew Vaughn;yes\n"
            "2015;Fantastic Four;20th Century Fox;Simon Kinberg and Matthew Vaughn;yes\n",
            encoding="utf-8",
        )
        settings = Settings(csv_path=csv_path, db_path=tmp_path / "startup.db", log_json=False)
        app = create_app(settings=settings)

        with TestClient(app) as client:
            assert client.get("/health").json()["movies"] == 2
            data = client.get("/api/movies/producers/intervals").json()
            assert data["max"][0]["producer"] == "Matthew Vaughn"
