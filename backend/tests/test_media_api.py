import pytest

from app.config import settings

API = settings.api_prefix


def _slugs(response):
    return [item["slug"] for item in response.json()["data"]]


class TestLetters:
    def test_list(self, client):
        response = client.get(f"{API}/letters")
        assert _slugs(response) == ["letter-three", "letter-two", "letter-one"]
        letter_one = response.json()["data"][2]
        assert letter_one["number"] == 1
        assert letter_one["pdf"] == "https://cdn.example.com/letter-one.pdf"
        assert response.json()["data"][0]["pdf"] == ""

    @pytest.mark.parametrize("params, expected", [
        ({"type": "all"}, ["letter-three", "letter-two", "letter-one"]),
        ({"type": "archive"}, ["letter-one"]),
        ({"type": "non-archive"}, ["letter-three", "letter-two"]),
        ({"letter_type": "love"}, ["letter-two"]),
        ({"type": "archive", "letter_type": "love"}, []),
        ({"type": "whatever"}, ["letter-three", "letter-two", "letter-one"]),
    ])
    def test_filters(self, client, params, expected):
        assert _slugs(client.get(f"{API}/letters", params=params)) == expected

    def test_detail(self, client):
        data = client.get(f"{API}/letters/letter-one").json()
        assert data == {
            "number": 1,
            "title": "Letter One",
            "images": [
                {"number": 1, "image": "https://cdn.example.com/l1-p1.jpg"},
                {"number": 2, "image": "https://cdn.example.com/l1-p2.jpg"},
            ],
        }

    def test_not_found(self, client):
        response = client.get(f"{API}/letters/missing")
        assert response.status_code == 404
        assert response.json()["code"] == "no_letter"


class TestPodcasts:
    def test_list_uses_podcast_page_size(self, client):
        response = client.get(f"{API}/podcasts")
        assert _slugs(response) == ["rain-sounds", "talking-books"]
        assert response.json()["meta"]["per_page"] == settings.podcasts_per_page

    def test_filter(self, client):
        assert _slugs(client.get(f"{API}/podcasts", params={"podcast_type": "interview"})) == ["talking-books"]

    def test_detail(self, client):
        data = client.get(f"{API}/podcasts/talking-books").json()
        assert data["name"] == "Talking Books"
        assert data["date"] == "2024-06-01"
        assert data["audio"] == "https://cdn.example.com/talking-books.mp3"
        assert data["host"] == "Sara"
        assert [t["slug"] for t in data["podcast_type"]] == ["interview"]

    def test_similar(self, client):
        assert _slugs(client.get(f"{API}/podcasts/similar/talking-books")) == ["rain-sounds"]

    def test_not_found(self, client):
        response = client.get(f"{API}/podcasts/similar/missing")
        assert response.status_code == 404
        assert response.json()["code"] == "no_podcast"


class TestPoems:
    def test_list_excerpt_is_first_lines(self, client):
        poems = {p["slug"]: p for p in client.get(f"{API}/poems").json()["data"]}
        assert poems["rain-song"]["excerpt"] == "line one<br>line two<br>line three"
        assert poems["rain-song"]["author"] == "Ali Rezaei"
        assert [t["slug"] for t in poems["rain-song"]["poem_type"]] == ["ghazal"]
        assert poems["night"]["excerpt"] == "first<br>second"

    @pytest.mark.parametrize("params, expected", [
        ({"poem_type": "ghazal"}, ["rain-song"]),
        ({"category": "fiction"}, ["rain-song"]),
        ({"poem_type": "free-verse,ghazal"}, ["night", "rain-song"]),
    ])
    def test_filters(self, client, params, expected):
        assert _slugs(client.get(f"{API}/poems", params=params)) == expected

    def test_detail(self, client):
        data = client.get(f"{API}/poems/rain-song").json()
        assert data["author"]["name"] == "Ali Rezaei"
        assert [t["slug"] for t in data["categories"]] == ["fiction"]

    def test_similar(self, client):
        assert _slugs(client.get(f"{API}/poems/similar/rain-song")) == ["night"]

    def test_not_found(self, client):
        response = client.get(f"{API}/poems/missing")
        assert response.status_code == 404
        assert response.json()["code"] == "no_poem"
