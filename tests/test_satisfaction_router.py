"""
Tests for /satisfaction endpoints.
"""

from app.config.errors import ErrorMessages
from app.utils.enums import get_all_company, get_all_introduce_text_category
from conftest import add_product, add_user


class TestPlatformSatisfaction:

    def test_whole_returns_top_tone_per_company(self, client, db, auth):
        user_id, headers = auth
        other = add_user(db, "other@example.com")
        add_product(db, user_id, "쿠팡", "패션", "친근한")
        add_product(db, other.id, "쿠팡", "패션", "전문적인")
        add_product(db, other.id, "쿠팡", "식품", "전문적인")
        add_product(db, other.id, "11번가", "식품", "유머러스한")

        response = client.get("/satisfaction/platform/platform-whole", headers=headers)

        assert response.status_code == 200
        top = {r["company"]: r["introduce_text_category"] for r in response.json()}
        assert top == {"쿠팡": "전문적인", "11번가": "유머러스한"}

    def test_mine_ignores_other_users(self, client, db, auth):
        user_id, headers = auth
        other = add_user(db, "other@example.com")
        add_product(db, user_id, "쿠팡", "패션", "친근한")
        add_product(db, other.id, "쿠팡", "패션", "전문적인")
        add_product(db, other.id, "쿠팡", "패션", "전문적인")

        response = client.get("/satisfaction/platform/platform-mine", headers=headers)

        assert response.status_code == 200
        assert response.json() == [
            {"company": "쿠팡", "introduce_text_category": "친근한", "introduce_text_category_count": 1}
        ]

    def test_category_kind_is_rejected(self, client, auth):
        _, headers = auth
        response = client.get("/satisfaction/platform/category-whole", headers=headers)

        assert response.status_code == 400
        assert response.json()["detail"] == ErrorMessages.NOT_EXIST_KIND


class TestCategorySatisfaction:

    def test_mine(self, client, db, auth):
        user_id, headers = auth
        add_product(db, user_id, "테무", "뷰티", "감성적인")
        add_product(db, user_id, "쿠팡", "뷰티", "감성적인")
        add_product(db, user_id, "쿠팡", "뷰티", "간결한")

        response = client.get("/satisfaction/category/category-mine", headers=headers)

        assert response.status_code == 200
        assert response.json() == [
            {"category": "뷰티", "introduce_text_category": "감성적인", "introduce_text_category_count": 2}
        ]

    def test_unknown_kind(self, client, auth):
        _, headers = auth
        response = client.get("/satisfaction/category/bogus", headers=headers)

        assert response.status_code == 400
        assert response.json()["detail"] == ErrorMessages.NOT_EXIST_KIND


class TestPlatformDetail:

    def test_full_matrix_with_zero_fill(self, client, db, auth):
        user_id, headers = auth
        add_product(db, user_id, "알리", "스포츠/레저", "유머러스한")
        add_product(db, user_id, "알리", "스포츠/레저", "유머러스한", satisfaction=False)

        response = client.get("/satisfaction/platform/detail/platform-mine", headers=headers)

        assert response.status_code == 200
        body = response.json()
        assert sorted(d["company"] for d in body) == sorted(get_all_company())

        tones = get_all_introduce_text_category()
        for detail in body:
            assert sorted(d["introduce_text_category"] for d in detail["data"]) == sorted(tones)

        ali = next(d for d in body if d["company"] == "알리")
        assert ali["data"][0] == {"introduce_text_category": "유머러스한", "introduce_text_category_count": 1}
        assert sum(d["introduce_text_category_count"] for d in ali["data"]) == 1

    def test_unknown_kind(self, client, auth):
        _, headers = auth
        response = client.get("/satisfaction/platform/detail/bogus", headers=headers)
        assert response.status_code == 400


def test_requires_authentication(client):
    response = client.get("/satisfaction/platform/platform-whole")
    assert response.status_code in (401, 403)


def test_rejects_invalid_token(client):
    response = client.get(
        "/satisfaction/platform/platform-whole",
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 401
