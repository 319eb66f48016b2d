import pytest

API = "/api/v1"


@pytest.fixture
def team(make_team, owner):
    return make_team(owner)


def _members(client, team_slug, user):
    return client.get(f"{API}/teams/{team_slug}/members", headers=user["headers"])


def _member_id(client, team_slug, actor, user):
    items = _members(client, team_slug, actor).get_json()["items"]
    return next(m["id"] for m in items if m["user_id"] == user["id"])


def test_creator_becomes_owner(client, owner, team):
    assert team["slug"] == "acme-docs"
    assert team["role"] == "owner"

    teams = client.get(f"{API}/teams", headers=owner["headers"]).get_json()["items"]
    assert [(t["slug"], t["role"]) for t in teams] == [("acme-docs", "owner")]

    body = _members(client, team["slug"], owner).get_json()
    assert body["current_user_role"] == "owner"
    assert [m["role"] for m in body["items"]] == ["owner"]
    assert body["permissions"]["assignable_roles"] == ["owner", "admin", "editor", "viewer"]


def test_duplicate_team_slug(client, owner, team):
    resp = client.post(f"{API}/teams", json={"name": "Acme Docs"}, headers=owner["headers"])
    assert resp.status_code == 409


def test_non_members_cannot_see_team(client, make_user, team):
    stranger = make_user("stranger@example.com")

    resp = client.get(f"{API}/teams/{team['slug']}", headers=stranger["headers"])
    assert resp.status_code == 403
    assert _members(client, team["slug"], stranger).status_code == 403


def test_invite_member(client, make_user, owner, team):
    editor = make_user("editor@example.com")

    resp = client.post(
        f"{API}/teams/{team['slug']}/members",
        json={"email": "EDITOR@example.com"},
        headers=owner["headers"],
    )
    assert resp.status_code == 201

    body = resp.get_json()
    assert body["message"] == "Successfully invited editor@example.com as editor"
    assert body["member"]["user_id"] == editor["id"]
    assert body["member"]["role"] == "editor"


def test_invite_unknown_user(client, owner, team):
    resp = client.post(
        f"{API}/teams/{team['slug']}/members",
        json={"email": "nobody@example.com", "role": "viewer"},
        headers=owner["headers"],
    )
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "User not found. They must sign up first."


def test_invite_existing_member(client, make_user, owner, team, invite):
    user = make_user("twice@example.com")
    invite(team["slug"], owner, user, role="viewer")

    resp = client.post(
        f"{API}/teams/{team['slug']}/members",
        json={"email": user["email"], "role": "viewer"},
        headers=owner["headers"],
    )
    assert resp.status_code == 409
    assert resp.get_json()["message"] == "This user is already a member of the team"


def test_role_names_are_case_insensitive_and_closed(client, make_user, owner, team):
    user = make_user("admin@example.com")

    bad = client.post(
        f"{API}/teams/{team['slug']}/members",
        json={"email": user["email"], "role": "superuser"},
        headers=owner["headers"],
    )
    assert bad.status_code == 400

    ok = client.post(
        f"{API}/teams/{team['slug']}/members",
        json={"email": user["email"], "role": "Admin"},
        headers=owner["headers"],
    )
    assert ok.status_code == 201
    assert ok.get_json()["member"]["role"] == "admin"


def test_viewer_cannot_manage_members(client, make_user, owner, team, invite):
    viewer = make_user("viewer@example.com")
    target = make_user("target@example.com")
    invite(team["slug"], owner, viewer, role="viewer")
    invite(team["slug"], owner, target, role="editor")

    body = _members(client, team["slug"], viewer).get_json()
    assert body["current_user_role"] == "viewer"
    assert body["permissions"] == {
        "can_invite": False,
        "can_change_roles": False,
        "can_remove_members": False,
        "assignable_roles": [],
    }

    outsider = make_user("outsider@example.com")
    invite_resp = client.post(
        f"{API}/teams/{team['slug']}/members",
        json={"email": outsider["email"], "role": "viewer"},
        headers=viewer["headers"],
    )
    assert invite_resp.status_code == 403

    member_id = _member_id(client, team["slug"], owner, target)
    change = client.put(
        f"{API}/teams/{team['slug']}/members/{member_id}",
        json={"role": "viewer"},
        headers=viewer["headers"],
    )
    assert change.status_code == 403

    remove = client.delete(
        f"{API}/teams/{team['slug']}/members/{member_id}",
        headers=viewer["headers"],
    )
    assert remove.status_code == 403

    roles = {m["user_id"]: m["role"] for m in _members(client, team["slug"], owner).get_json()["items"]}
    assert roles[target["id"]] == "editor"


def test_change_and_remove_member(client, make_user, owner, team, invite):
    user = make_user("member@example.com")
    invite(team["slug"], owner, user, role="viewer")
    member_id = _member_id(client, team["slug"], owner, user)

    resp = client.put(
        f"{API}/teams/{team['slug']}/members/{member_id}",
        json={"role": "EDITOR"},
        headers=owner["headers"],
    )
    assert resp.status_code == 200
    assert resp.get_json()["role"] == "editor"

    same = client.put(
        f"{API}/teams/{team['slug']}/members/{member_id}",
        json={"role": "editor"},
        headers=owner["headers"],
    )
    assert same.status_code == 400

    removed = client.delete(f"{API}/teams/{team['slug']}/members/{member_id}", headers=owner["headers"])
    assert removed.status_code == 200
    assert client.get(f"{API}/teams/{team['slug']}", headers=user["headers"]).status_code == 403


def test_team_keeps_its_last_owner(client, owner, team):
    member_id = _member_id(client, team["slug"], owner, owner)

    demote = client.put(
        f"{API}/teams/{team['slug']}/members/{member_id}",
        json={"role": "admin"},
        headers=owner["headers"],
    )
    assert demote.status_code == 400
    assert demote.get_json()["message"] == "A team must keep at least one owner"

    leave = client.delete(f"{API}/teams/{team['slug']}/members/{member_id}", headers=owner["headers"])
    assert leave.status_code == 400


def test_owner_can_step_down_once_another_owner_exists(client, make_user, owner, team, invite):
    second = make_user("second@example.com")
    invite(team["slug"], owner, second, role="owner")
    member_id = _member_id(client, team["slug"], owner, owner)

    resp = client.put(
        f"{API}/teams/{team['slug']}/members/{member_id}",
        json={"role": "admin"},
        headers=owner["headers"],
    )
    assert resp.status_code == 200
    assert resp.get_json()["role"] == "admin"


def test_admin_cannot_grant_or_revoke_owner(client, make_user, owner, team, invite):
    admin = make_user("admin@example.com")
    editor = make_user("editor@example.com")
    invite(team["slug"], owner, admin, role="admin")
    invite(team["slug"], owner, editor, role="editor")

    editor_id = _member_id(client, team["slug"], owner, editor)
    promote = client.put(
        f"{API}/teams/{team['slug']}/members/{editor_id}",
        json={"role": "owner"},
        headers=admin["headers"],
    )
    assert promote.status_code == 403

    owner_id = _member_id(client, team["slug"], owner, owner)
    demote = client.put(
        f"{API}/teams/{team['slug']}/members/{owner_id}",
        json={"role": "viewer"},
        headers=admin["headers"],
    )
    assert demote.status_code == 403

    promote_admin = client.put(
        f"{API}/teams/{team['slug']}/members/{editor_id}",
        json={"role": "admin"},
        headers=admin["headers"],
    )
    assert promote_admin.status_code == 200


def test_workspace_creation_requires_admin(client, make_user, owner, team, invite):
    editor = make_user("editor@example.com")
    invite(team["slug"], owner, editor, role="editor")
    url = f"{API}/teams/{team['slug']}/workspaces"

    assert client.post(url, json={"name": "Handbook"}, headers=editor["headers"]).status_code == 403

    created = client.post(url, json={"name": "Handbook"}, headers=owner["headers"])
    assert created.status_code == 201

    workspace = created.get_json()
    assert workspace["slug"] == "handbook"
    assert workspace["theme"] == "default"
    assert workspace["icon"] == "📚"
    assert workspace["is_public"] is False

    dup = client.post(url, json={"name": "Handbook"}, headers=owner["headers"])
    assert dup.status_code == 409

    bad_theme = client.post(url, json={"name": "Other", "theme": "neon"}, headers=owner["headers"])
    assert bad_theme.status_code == 400

    detail = client.get(f"{API}/teams/{team['slug']}", headers=editor["headers"]).get_json()
    assert detail["role"] == "editor"
    assert [w["slug"] for w in detail["workspaces"]] == ["handbook"]


def test_non_string_theme_is_rejected(client, owner, team):
    url = f"{API}/teams/{team['slug']}/workspaces"

    created = client.post(url, json={"name": "Handbook", "theme": {"color": "red"}}, headers=owner["headers"])
    assert created.status_code == 400

    client.post(url, json={"name": "Handbook"}, headers=owner["headers"])
    updated = client.put(f"{API}/w/handbook", json={"theme": ["dark"]}, headers=owner["headers"])
    assert updated.status_code == 400

    assert client.get(f"{API}/w/handbook", headers=owner["headers"]).get_json()["theme"] == "default"


def test_member_routes_reject_non_object_bodies(client, owner, team):
    resp = client.post(f"{API}/teams/{team['slug']}/members", json=["someone@example.com"], headers=owner["headers"])
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid request body"
