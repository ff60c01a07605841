from app.config import settings

API = settings.api_prefix


def _slugs(response):
    return [item["slug"] for item in response.json()["data"]]


class TestArticles:
    def test_list_newest_first(self, client):
        response = client.get(f"{API}/articles")
        assert response.status_code == 200
        body = response.json()
        assert _slugs(response) == ["on-listening", "on-writing", "on-reading"]
        assert body["meta"] == {"total": 3, "pages": 1, "page": 1, "per_page": settings.default_per_page}

    def test_list_item_shape(self, client):
        articles = {a["slug"]: a for a in client.get(f"{API}/articles").json()["data"]}
        writing = articles["on-writing"]
        assert writing["author"] == "Ali Rezaei"
        assert writing["excerpt"] == "Manual excerpt."
        assert [c["slug"] for c in writing["categories"]] == ["essays", "fiction"]
        assert articles["on-listening"]["author"] == ""
        assert articles["on-listening"]["categories"] == []
        assert articles["on-reading"]["excerpt"] == "Reading slowly is a discipline of its own."

    def test_pagination(self, client):
        response = client.get(f"{API}/articles", params={"per_page": 2, "page": 2})
        assert _slugs(response) == ["on-reading"]
        assert response.json()["meta"] == {"total": 3, "pages": 2, "page": 2, "per_page": 2}

    def test_invalid_pagination_falls_back(self, client):
        response = client.get(f"{API}/articles", params={"page": "abc", "per_page": "-5"})
        assert response.status_code == 200
        meta = response.json()["meta"]
        assert meta["page"] == 1
        assert meta["per_page"] == settings.default_per_page

    def test_page_past_the_end(self, client):
        response = client.get(f"{API}/articles", params={"page": 5})
        assert response.status_code == 200
        assert response.json()["data"] == []
        assert response.json()["meta"]["total"] == 3

    def test_page_beyond_database_range(self, client):
        response = client.get(f"{API}/articles", params={"page": "99999999999999999999"})
        assert response.status_code == 200
        body = response.json()
        assert body["data"] == []
        assert body["meta"] == {
            "total": 3,
            "pages": 1,
            "page": 99999999999999999999,
            "per_page": settings.default_per_page,
        }

    def test_similar_excludes_item(self, client):
        response = client.get(f"{API}/articles/similar/on-reading")
        assert response.status_code == 200
        assert "on-reading" not in _slugs(response)
        assert response.json()["meta"]["total"] == 2

    def test_detail(self, client):
        response = client.get(f"{API}/articles/on-reading")
        assert response.status_code == 200
        data = response.json()
        assert data["big_image"] == "https://cdn.example.com/reading.jpg"
        assert data["date_shamsi"] == "1402/11/12"
        assert data["author"]["name"] == "Jane Doe"
        assert data["author"]["instagram"] == "janedoe"
        assert data["categories"] == [{"id": data["categories"][0]["id"], "name": "Essays", "slug": "essays"}]

    def test_detail_without_author(self, client):
        data = client.get(f"{API}/articles/on-listening").json()
        assert data["author"] is None
        assert data["big_image"] == ""

    def test_not_found(self, client):
        response = client.get(f"{API}/articles/missing")
        assert response.status_code == 404
        assert response.json() == {
            "code": "no_article",
            "message": "No article found with the provided slug",
            "data": {"status": 404},
        }

    def test_similar_not_found(self, client):
        response = client.get(f"{API}/articles/similar/missing")
        assert response.status_code == 404
        assert response.json()["code"] == "no_article"


class TestAuthorReviews:
    def test_list(self, client):
        response = client.get(f"{API}/author-reviews")
        assert _slugs(response) == ["review-of-winter"]
        assert response.json()["data"][0]["author"] == "Jane Doe"

    def test_detail(self, client):
        data = client.get(f"{API}/author-reviews/review-of-winter").json()
        assert data["title"] == "A Review of Winter"
        assert data["author"]["name"] == "Jane Doe"

    def test_articles_are_not_reviews(self, client):
        response = client.get(f"{API}/author-reviews/on-reading")
        assert response.status_code == 404
        assert response.json()["code"] == "no_review"


class TestAuthors:
    def test_list(self, client):
        response = client.get(f"{API}/authors")
        assert _slugs(response) == ["ali-rezaei", "jane-doe"]
        jane = response.json()["data"][1]
        assert jane == {
            "name": "Jane Doe",
            "slug": "jane-doe",
            "image": "https://cdn.example.com/jane.jpg",
            "job": "Novelist",
            "location": "Kabul",
            "total_letters": 3,
        }

    def test_detail(self, client):
        data = client.get(f"{API}/authors/jane-doe").json()
        assert data["name"] == "Jane Doe"
        assert data["age"] == 41
        assert data["content"] == "<p>Jane writes stories.</p>"

    def test_not_found(self, client):
        response = client.get(f"{API}/authors/nobody")
        assert response.status_code == 404
        assert response.json()["code"] == "no_author"

    def test_archive(self, client):
        assert _slugs(client.get(f"{API}/authors-archive")) == ["old-master"]
        data = client.get(f"{API}/authors-archive/old-master").json()
        assert data["title"] == "Old Master"
        assert data["age"] == 90
        assert client.get(f"{API}/authors-archive/jane-doe").json()["code"] == "no_author"


class TestBooks:
    def test_featured_is_latest(self, client):
        data = client.get(f"{API}/books/featured").json()
        assert data["slug"] == "second-book"
        assert data["pdf"] == "https://cdn.example.com/second.pdf"

    def test_detail(self, client):
        data = client.get(f"{API}/books/first-book").json()
        assert data["pdf"] == "https://cdn.example.com/first.pdf"
        assert data["author"]["name"] == "Jane Doe"
        assert data["categories"] == []

    def test_not_found(self, client):
        response = client.get(f"{API}/books/missing")
        assert response.status_code == 404
        assert response.json()["code"] == "no_book"


def test_about_us(client):
    response = client.get(f"{API}/about-us")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "About Us"
    assert data["questions"] == [
        {"question": "What is Zaryab?", "answer": "A literary magazine."},
        {"question": "Who writes here?", "answer": "Everyone."},
    ]
