"""End-to-end tests for /api/posts."""

import pytest

from conftest import AUTHOR_ID


def new_post(client, auth_headers, **overrides):
    body = {"title": "Hello World", "slug": "hello-world", "content": "word " * 250}
    body.update(overrides)
    response = client.post("/api/posts", json=body, headers=auth_headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestAuthentication:
    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", "/api/posts"),
            ("get", "/api/posts/some-id"),
            ("post", "/api/posts"),
            ("put", "/api/posts/some-id"),
            ("patch", "/api/posts/some-id"),
            ("delete", "/api/posts/some-id"),
        ],
    )
    def test_protected_routes_require_a_token(self, client, method, path):
        response = getattr(client, method)(path)
        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_garbage_token_is_rejected(self, client):
        response = client.get("/api/posts", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_public_routes_are_open(self, client):
        assert client.get("/api/posts/published").status_code == 200


class TestCreate:
    def test_create_returns_derived_fields_in_camel_case(self, client, auth_headers):
        post = new_post(client, auth_headers, tags=["intro", "meta"], featuredImageUrl="/api/images/abc")

        assert post["readingTime"] == "2 min read"
        assert post["publishedAt"] is None
        assert post["published"] is False
        assert post["authorId"] == AUTHOR_ID
        assert post["tags"] == ["intro", "meta"]
        assert post["featuredImageUrl"] == "/api/images/abc"
        assert post["id"] and post["createdAt"] and post["updatedAt"]

    def test_caller_cannot_set_derived_fields(self, client, auth_headers):
        post = new_post(
            client, auth_headers, readingTime="42 min read", publishedAt="2001-01-01T00:00:00Z"
        )
        assert post["readingTime"] == "2 min read"
        assert post["publishedAt"] is None

    def test_create_published_sets_published_at(self, client, auth_headers):
        post = new_post(client, auth_headers, published=True)
        assert post["publishedAt"] is not None

    def test_duplicate_slug(self, client, auth_headers):
        first = new_post(client, auth_headers, title="First")
        response = client.post(
            "/api/posts",
            json={"title": "Second", "slug": "hello-world", "content": "body"},
            headers=auth_headers,
        )
        assert response.status_code == 409
        assert response.json() == {"message": "A post with this slug already exists"}

        stored = client.get(f"/api/posts/{first['id']}", headers=auth_headers).json()
        assert stored["title"] == "First"

    def test_validation_errors_are_field_level(self, client, auth_headers):
        response = client.post(
            "/api/posts",
            json={"title": "Bad", "slug": "Not A Slug"},
            headers=auth_headers,
        )
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation error"
        locations = [tuple(err["loc"]) for err in body["errors"]]
        assert ("body", "slug") in locations
        assert ("body", "content") in locations


class TestReadAndUpdate:
    def test_get_unknown_post(self, client, auth_headers):
        response = client.get("/api/posts/missing", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}

    def test_put_is_a_partial_update(self, client, auth_headers):
        post = new_post(client, auth_headers, excerpt="teaser")
        response = client.put(
            f"/api/posts/{post['id']}",
            json={"content": "word " * 401, "metaTitle": "SEO title"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        updated = response.json()
        assert updated["readingTime"] == "3 min read"
        assert updated["metaTitle"] == "SEO title"
        assert updated["excerpt"] == "teaser"
        assert updated["title"] == "Hello World"

    def test_put_unknown_post(self, client, auth_headers):
        response = client.put("/api/posts/missing", json={"title": "x"}, headers=auth_headers)
        assert response.status_code == 404

    def test_put_null_title_is_rejected(self, client, auth_headers):
        post = new_post(client, auth_headers)
        response = client.put(f"/api/posts/{post['id']}", json={"title": None}, headers=auth_headers)
        assert response.status_code == 400

    def test_put_to_taken_slug(self, client, auth_headers):
        new_post(client, auth_headers, slug="taken")
        post = new_post(client, auth_headers, slug="mine")
        response = client.put(f"/api/posts/{post['id']}", json={"slug": "taken"}, headers=auth_headers)
        assert response.status_code == 409


class TestPublishToggle:
    def test_first_publish_stamp_survives_toggles(self, client, auth_headers):
        post = new_post(client, auth_headers)
        url = f"/api/posts/{post['id']}"

        published = client.patch(url, json={"published": True}, headers=auth_headers).json()
        stamp = published["publishedAt"]
        assert stamp is not None

        client.patch(url, json={"published": False}, headers=auth_headers)
        again = client.patch(url, json={"published": True}, headers=auth_headers).json()

        assert again["published"] is True
        assert again["publishedAt"] == stamp

    @pytest.mark.parametrize("body", [{"published": "true"}, {"published": 1}, {}, {"published": None}])
    def test_published_must_be_boolean(self, client, auth_headers, body):
        post = new_post(client, auth_headers)
        response = client.patch(f"/api/posts/{post['id']}", json=body, headers=auth_headers)
        assert response.status_code == 400

    def test_patch_unknown_post(self, client, auth_headers):
        response = client.patch("/api/posts/missing", json={"published": True}, headers=auth_headers)
        assert response.status_code == 404

    def test_patch_only_touches_published(self, client, auth_headers):
        post = new_post(client, auth_headers)
        response = client.patch(
            f"/api/posts/{post['id']}",
            json={"published": True, "title": "Sneaky"},
            headers=auth_headers,
        )
        assert response.json()["title"] == "Hello World"


class TestPublicReads:
    def test_slug_lookup_hides_drafts(self, client, auth_headers):
        post = new_post(client, auth_headers)

        assert client.get("/api/posts/slug/hello-world").status_code == 404

        client.patch(f"/api/posts/{post['id']}", json={"published": True}, headers=auth_headers)
        response = client.get("/api/posts/slug/hello-world")
        assert response.status_code == 200
        assert response.json()["id"] == post["id"]

    def test_published_list_is_newest_first_and_excludes_drafts(self, client, auth_headers):
        older = new_post(client, auth_headers, slug="older")
        newer = new_post(client, auth_headers, slug="newer")
        new_post(client, auth_headers, slug="draft")

        client.patch(f"/api/posts/{older['id']}", json={"published": True}, headers=auth_headers)
        client.patch(f"/api/posts/{newer['id']}", json={"published": True}, headers=auth_headers)

        slugs = [p["slug"] for p in client.get("/api/posts/published").json()]
        assert slugs == ["newer", "older"]

    def test_admin_list_includes_drafts(self, client, auth_headers):
        new_post(client, auth_headers, slug="one")
        new_post(client, auth_headers, slug="two", published=True)
        slugs = [p["slug"] for p in client.get("/api/posts", headers=auth_headers).json()]
        assert slugs == ["two", "one"]


class TestDelete:
    def test_delete_existing(self, client, auth_headers):
        post = new_post(client, auth_headers)
        response = client.delete(f"/api/posts/{post['id']}", headers=auth_headers)
        assert response.status_code == 204
        assert client.get(f"/api/posts/{post['id']}", headers=auth_headers).status_code == 404

    def test_delete_unknown_is_204_and_harmless(self, client, auth_headers):
        keep = new_post(client, auth_headers)
        response = client.delete("/api/posts/does-not-exist", headers=auth_headers)
        assert response.status_code == 204
        remaining = client.get("/api/posts", headers=auth_headers).json()
        assert [p["id"] for p in remaining] == [keep["id"]]
