from fastapi.testclient import TestClient

from app.main import app


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_ready_with_lifespan():
    with TestClient(app) as c:
        response = c.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "connected"}


def test_favicon(client):
    assert client.get("/favicon.ico").status_code == 204


def test_layout_locals(client, alice):
    anonymous = client.get("/").text
    assert "MicroBlog" in anonymous
    assert "2024" in anonymous
    assert 'href="/login"' in anonymous
    assert 'href="/logout"' in alice.get("/").text


def test_static_stylesheet(client):
    response = client.get("/static/css/styles.css")
    assert response.status_code == 200
    assert "text/css" in response.headers["content-type"]


def test_non_integer_post_id_rejected(alice):
    assert alice.post("/like/abc", follow_redirects=False).status_code == 422
