"""Tests for the article moderation endpoints."""

from modules.articles.models import ArticleStatus
from tests.conftest import auth_headers_for


MISSING_ID = "3fa85f64-5717-4562-b3fc-2c963f66afa6"


class TestGate:
    def test_without_token_is_401(self, client):
        assert client.get("/api/admin/articles").status_code == 401

    def test_regular_user_is_403(self, client, regular_user):
        response = client.get("/api/admin/articles", headers=auth_headers_for(regular_user))
        assert response.status_code == 403
        assert response.json()["message"] == "Admin access required"

    def test_admin_and_super_admin_allowed(self, client, admin_user, super_admin):
        assert client.get("/api/admin/articles", headers=auth_headers_for(admin_user)).status_code == 200
        assert client.get("/api/admin/articles", headers=auth_headers_for(super_admin)).status_code == 200


class TestModeration:
    def test_list_with_filters(self, client, article_repo, admin_user):
        article_repo.add("Approved one", status=ArticleStatus.APPROVED)
        article_repo.add("Pending one")

        response = client.get(
            "/api/admin/articles?status=approved&page=1&page_size=10",
            headers=auth_headers_for(admin_user),
        )

        data = response.json()
        assert data["total"] == 1
        assert data["pages"] == 1
        assert data["articles"][0]["title"] == "Approved one"

    def test_invalid_status_filter_is_400(self, client, admin_user):
        response = client.get("/api/admin/articles?status=bogus", headers=auth_headers_for(admin_user))
        assert response.status_code == 400

    def test_get_article(self, client, article_repo, admin_user):
        article = article_repo.add("Hello")
        response = client.get(f"/api/admin/articles/{article.id}", headers=auth_headers_for(admin_user))
        assert response.status_code == 200
        assert response.json()["status"] == "pending"

    def test_get_missing_is_404(self, client, admin_user):
        response = client.get(f"/api/admin/articles/{MISSING_ID}", headers=auth_headers_for(admin_user))
        assert response.status_code == 404
        assert response.json()["error"] == "ARTICLE_NOT_FOUND"

    def test_approve(self, client, article_repo, admin_user):
        article = article_repo.add("Hello")

        response = client.patch(
            f"/api/admin/articles/{article.id}",
            json={"status": "approved"},
            headers=auth_headers_for(admin_user),
        )

        assert response.status_code == 200
        assert response.json()["status"] == "approved"
        assert article_repo.get_by_id(article.id).status == ArticleStatus.APPROVED

    def test_delete(self, client, article_repo, admin_user):
        article = article_repo.add("Hello")

        response = client.delete(f"/api/admin/articles/{article.id}", headers=auth_headers_for(admin_user))

        assert response.status_code == 200
        assert article_repo.rows == {}

    def test_bulk_delete(self, client, article_repo, super_admin):
        first = article_repo.add("One")
        second = article_repo.add("Two")

        response = client.delete(
            f"/api/admin/articles?ids={first.id},{second.id}",
            headers=auth_headers_for(super_admin),
        )

        assert response.json()["deleted_count"] == 2

    def test_bulk_delete_without_ids_is_400(self, client, super_admin):
        response = client.delete("/api/admin/articles?ids=,", headers=auth_headers_for(super_admin))
        assert response.status_code == 400
