"""
Shared fixtures: a fresh in-memory database per test and helpers that
register users and build the workspace hierarchy over the HTTP API.
"""
import pytest

from docshub import create_app
from docshub.extensions import db

API = "/api/v1"


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(client):
    """Register a user; returns {"id", "email", "headers"}."""
    def _make(email, password="password123"):
        resp = client.post(f"{API}/auth/register", json={"email": email, "password": password})
        assert resp.status_code == 201, resp.get_json()
        body = resp.get_json()
        return {
            "id": body["user"]["id"],
            "email": body["user"]["email"],
            "headers": {"Authorization": f"Bearer {body['access_token']}"},
        }
    return _make


@pytest.fixture
def owner(make_user):
    return make_user("owner@example.com")


@pytest.fixture
def make_team(client):
    def _make(user, name="Acme Docs", slug=None):
        payload = {"name": name}
        if slug:
            payload["slug"] = slug
        resp = client.post(f"{API}/teams", json=payload, headers=user["headers"])
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return _make


@pytest.fixture
def invite(client):
    """Add an already registered user to a team with the given role."""
    def _invite(team_slug, actor, user, role="editor"):
        resp = client.post(
            f"{API}/teams/{team_slug}/members",
            json={"email": user["email"], "role": role},
            headers=actor["headers"],
        )
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["member"]
    return _invite


@pytest.fixture
def workspace_setup(client, owner, make_team):
    """
    Team "acme-docs" owned by `owner`, with a private workspace "handbook",
    a collection "guides" and a draft document "getting-started".
    """
    team = make_team(owner)

    resp = client.post(
        f"{API}/teams/{team['slug']}/workspaces",
        json={"name": "Handbook"},
        headers=owner["headers"],
    )
    assert resp.status_code == 201, resp.get_json()
    workspace = resp.get_json()

    resp = client.post(
        f"{API}/w/{workspace['slug']}/collections",
        json={"name": "Guides"},
        headers=owner["headers"],
    )
    assert resp.status_code == 201, resp.get_json()
    collection = resp.get_json()

    resp = client.post(
        f"{API}/w/{workspace['slug']}/collections/{collection['slug']}/documents",
        json={"title": "Getting Started", "content": "# Welcome\n\nFirst draft."},
        headers=owner["headers"],
    )
    assert resp.status_code == 201, resp.get_json()
    document = resp.get_json()

    return {
        "team": team,
        "workspace": workspace,
        "collection": collection,
        "document": document,
    }
