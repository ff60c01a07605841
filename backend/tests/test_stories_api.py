import pytest

from app.config import settings

API = settings.api_prefix


def _slugs(response):
    return [item["slug"] for item in response.json()["data"]]


class TestStories:
    def test_list(self, client):
        response = client.get(f"{API}/stories")
        assert _slugs(response) == ["quiet-river", "the-long-road"]
        road = response.json()["data"][1]
        assert road["author"] == "Jane Doe"
        assert road["excerpt"] == "A journey in four parts."
        assert road["duration"] == "40 min"
        assert [c["slug"] for c in road["categories"]] == ["fiction"]

    @pytest.mark.parametrize("params, expected", [
        ({"category": "fiction"}, ["the-long-road"]),
        ({"category": "fiction,essays"}, ["quiet-river", "the-long-road"]),
        ({"story_type": "short"}, ["quiet-river"]),
        ({"category": "fiction", "story_type": "short"}, []),
        ({"category": "unknown"}, []),
    ])
    def test_filters(self, client, params, expected):
        assert _slugs(client.get(f"{API}/stories", params=params)) == expected

    def test_similar(self, client):
        assert _slugs(client.get(f"{API}/stories/similar/the-long-road")) == ["quiet-river"]

    def test_collection(self, client):
        response = client.get(f"{API}/stories/collection/winter-tales")
        assert _slugs(response) == ["the-long-road"]
        assert response.json()["meta"]["total"] == 1

    def test_unknown_collection(self, client):
        response = client.get(f"{API}/stories/collection/summer")
        assert response.status_code == 404
        assert response.json()["code"] == "no_collection"

    def test_detail(self, client):
        data = client.get(f"{API}/stories/the-long-road").json()
        assert data["author"]["name"] == "Jane Doe"
        assert [t["slug"] for t in data["story_type"]] == ["serial"]
        assert [t["slug"] for t in data["collection"]] == ["winter-tales"]
        assert [e["slug"] for e in data["episodes"]] == [
            "long-road-1",
            "long-road-2",
            "long-road-3",
            "long-road-4",
        ]
        assert data["episodes"][0] == {
            "title": "Part One",
            "slug": "long-road-1",
            "episode_number": 1,
            "episode_title": "The Start",
        }

    def test_detail_not_found(self, client):
        response = client.get(f"{API}/stories/missing")
        assert response.status_code == 404
        assert response.json()["code"] == "no_story"


class TestEpisodes:
    @pytest.mark.parametrize("slug, previous, following", [
        ("long-road-1", None, "long-road-2"),
        ("long-road-2", "long-road-1", "long-road-3"),
        ("long-road-3", "long-road-2", "long-road-4"),
        ("long-road-4", "long-road-3", None),
    ])
    def test_neighbours(self, client, slug, previous, following):
        data = client.get(f"{API}/episodes/{slug}").json()
        assert data["previous_episode"] == previous
        assert data["next_episode"] == following

    def test_detail(self, client):
        data = client.get(f"{API}/episodes/long-road-3").json()
        assert data["story_slug"] == "the-long-road"
        assert data["episode_number"] == 3
        assert data["episode_title"] == "The Pass"
        assert data["author"]["name"] == "Jane Doe"
        assert [c["slug"] for c in data["categories"]] == ["fiction"]
        assert [c["slug"] for c in data["collection"]] == ["winter-tales"]

    def test_not_found(self, client):
        response = client.get(f"{API}/episodes/missing")
        assert response.status_code == 404
        assert response.json()["code"] == "no_episode"


def test_featured_story(client):
    response = client.get(f"{API}/featured-story")
    assert response.status_code == 200
    data = response.json()
    assert data["slug"] == "the-long-road"
    assert data["author"] == "Jane Doe"


def test_latest_story_champion(client):
    data = client.get(f"{API}/story-champion/latest").json()
    assert data == {
        "featured_image": "https://cdn.example.com/champion.jpg",
        "author": {"name": "Ali Rezaei", "slug": "ali-rezaei"},
        "story": {"title": "Quiet River", "excerpt": "The river kept its secrets.", "slug": "quiet-river"},
    }
