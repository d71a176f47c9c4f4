"""Review endpoints."""

from httpx import AsyncClient

from tests.conftest import auth_cookie


async def test_post_and_list_reviews(client: AsyncClient):
    body = {
        "name": "Rita",
        "email": "rita@example.com",
        "rating": 5,
        "message": "Adopted Max, he is wonderful",
    }
    created = await client.post("/reviews", json=body, headers=auth_cookie(body["email"]))
    assert created.status_code == 201

    response = await client.get("/reviews")
    assert response.status_code == 200
    assert [r["message"] for r in response.json()] == [body["message"]]


async def test_rating_out_of_range(client: AsyncClient):
    response = await client.post(
        "/reviews",
        json={"name": "X", "email": "x@example.com", "rating": 6, "message": "!"},
        headers=auth_cookie("x@example.com"),
    )
    assert response.status_code == 422
    assert response.json()["title"] == "Validation Error"
