import pytest

from docshub.application.fusiobook.save_document import save_document
from docshub.domain.invariants.exceptions import VersionConflict
from docshub.extensions import db
from docshub.models.document import Document
from docshub.models.document_version import DocumentVersion

API = "/api/v1"


@pytest.fixture
def doc_url(workspace_setup):
    return f"{API}/w/{workspace_setup['workspace']['slug']}/docs/{workspace_setup['document']['slug']}"


def _versions(client, doc_url, user, include_content=False):
    suffix = "?include_content=true" if include_content else ""
    resp = client.get(f"{doc_url}/versions{suffix}", headers=user["headers"])
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()


def _make_public(client, owner, workspace_setup):
    resp = client.put(
        f"{API}/w/{workspace_setup['workspace']['slug']}",
        json={"is_public": True},
        headers=owner["headers"],
    )
    assert resp.status_code == 200, resp.get_json()


def test_new_document_starts_at_version_one(client, owner, workspace_setup, doc_url):
    document = workspace_setup["document"]
    assert document["version"] == 1
    assert document["slug"] == "getting-started"
    assert document["is_published"] is False
    assert document["icon"] == "📄"

    history = _versions(client, doc_url, owner)
    assert history["current_version"] == 1
    assert [(v["version"], v["change_summary"]) for v in history["items"]] == [(1, "Initial version")]


def test_save_appends_a_version(client, owner, doc_url):
    resp = client.put(
        doc_url,
        json={"version": 1, "content": "Second draft"},
        headers=owner["headers"],
    )
    assert resp.status_code == 200
    assert resp.get_json()["version"] == 2
    assert resp.get_json()["content"] == "Second draft"

    history = _versions(client, doc_url, owner, include_content=True)
    assert [v["version"] for v in history["items"]] == [2, 1]
    assert history["items"][0]["change_summary"] == "Updated to version 2"
    assert history["items"][0]["content"] == "Second draft"
    # The earlier row is untouched
    assert history["items"][1]["content"] == "# Welcome\n\nFirst draft."


def test_save_uses_custom_change_summary(client, owner, doc_url):
    client.put(
        doc_url,
        json={"version": 1, "title": "Start Here", "change_summary": "Renamed"},
        headers=owner["headers"],
    )

    latest = _versions(client, doc_url, owner)["items"][0]
    assert latest["title"] == "Start Here"
    assert latest["change_summary"] == "Renamed"


def test_stale_save_is_rejected_without_writing(client, owner, doc_url):
    first = client.put(doc_url, json={"version": 1, "content": "Alice"}, headers=owner["headers"])
    assert first.status_code == 200

    stale = client.put(doc_url, json={"version": 1, "content": "Bob"}, headers=owner["headers"])
    assert stale.status_code == 409
    assert stale.get_json()["error"] == "VersionConflict"
    assert stale.get_json()["current_version"] == 2

    history = _versions(client, doc_url, owner, include_content=True)
    assert [v["version"] for v in history["items"]] == [2, 1]
    assert history["items"][0]["content"] == "Alice"


def test_save_requires_the_loaded_version(client, owner, doc_url):
    missing = client.put(doc_url, json={"content": "x"}, headers=owner["headers"])
    assert missing.status_code == 400

    via_header = client.put(
        doc_url,
        json={"content": "x"},
        headers={**owner["headers"], "If-Match": '"1"'},
    )
    assert via_header.status_code == 200
    assert via_header.get_json()["version"] == 2


def test_restore_appends_a_new_version(client, owner, doc_url):
    client.put(doc_url, json={"version": 1, "content": "Changed"}, headers=owner["headers"])

    resp = client.post(
        f"{doc_url}/versions/1/restore",
        json={"version": 2},
        headers=owner["headers"],
    )
    assert resp.status_code == 200
    assert resp.get_json()["version"] == 3
    assert resp.get_json()["content"] == "# Welcome\n\nFirst draft."

    history = _versions(client, doc_url, owner)
    assert [v["version"] for v in history["items"]] == [3, 2, 1]
    assert history["items"][0]["change_summary"] == "Restored from version 1"

    missing = client.post(f"{doc_url}/versions/9/restore", json={"version": 3}, headers=owner["headers"])
    assert missing.status_code == 404


def test_publish_does_not_bump_version(client, owner, doc_url):
    resp = client.post(f"{doc_url}/publish", headers=owner["headers"])
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "published"
    assert resp.get_json()["version"] == 1

    again = client.post(f"{doc_url}/publish", headers=owner["headers"])
    assert again.status_code == 400

    unpublished = client.post(f"{doc_url}/unpublish", headers=owner["headers"])
    assert unpublished.get_json()["status"] == "draft"
    assert _versions(client, doc_url, owner)["current_version"] == 1


def test_document_slug_is_unique_per_collection(client, owner, workspace_setup):
    ws = workspace_setup["workspace"]["slug"]
    url = f"{API}/w/{ws}/collections/guides/documents"

    dup = client.post(url, json={"title": "Getting Started"}, headers=owner["headers"])
    assert dup.status_code == 409
    assert dup.get_json()["message"] == "A document with this slug already exists in this collection"

    client.post(f"{API}/w/{ws}/collections", json={"name": "Reference"}, headers=owner["headers"])
    other = client.post(
        f"{API}/w/{ws}/collections/reference/documents",
        json={"title": "Getting Started"},
        headers=owner["headers"],
    )
    assert other.status_code == 201


def test_template_prefills_content(client, owner, workspace_setup):
    ws = workspace_setup["workspace"]["slug"]

    template = client.post(
        f"{API}/w/{ws}/templates",
        json={"name": "Runbook", "content": "## Steps", "is_default": True},
        headers=owner["headers"],
    ).get_json()

    resp = client.post(
        f"{API}/w/{ws}/collections/guides/documents",
        json={"title": "Deploys", "template_id": template["id"]},
        headers=owner["headers"],
    )
    assert resp.status_code == 201
    assert resp.get_json()["content"] == "## Steps"
    assert resp.get_json()["template"] == template["id"]

    listed = client.get(f"{API}/w/{ws}/templates", headers=owner["headers"]).get_json()["items"]
    assert [(t["name"], t["is_default"]) for t in listed] == [("Runbook", True)]


def test_viewer_can_comment_but_not_edit(client, make_user, owner, invite, workspace_setup, doc_url):
    viewer = make_user("viewer@example.com")
    invite(workspace_setup["team"]["slug"], owner, viewer, role="viewer")

    edit = client.put(doc_url, json={"version": 1, "content": "nope"}, headers=viewer["headers"])
    assert edit.status_code == 403

    publish = client.post(f"{doc_url}/publish", headers=viewer["headers"])
    assert publish.status_code == 403

    first = client.post(f"{doc_url}/comments", json={"content": "Looks good"}, headers=viewer["headers"])
    assert first.status_code == 201
    client.post(f"{doc_url}/comments", json={"content": "One nit"}, headers=owner["headers"])

    comments = client.get(f"{doc_url}/comments", headers=viewer["headers"]).get_json()["items"]
    assert [c["content"] for c in comments] == ["Looks good", "One nit"]
    assert comments[0]["user_email"] == "viewer@example.com"

    resolved = client.put(
        f"{doc_url}/comments/{first.get_json()['id']}",
        json={"resolved": True},
        headers=viewer["headers"],
    )
    assert resolved.status_code == 200
    assert resolved.get_json()["resolved"] is True

    invalid = client.put(
        f"{doc_url}/comments/{first.get_json()['id']}",
        json={"resolved": "yes"},
        headers=viewer["headers"],
    )
    assert invalid.status_code == 400


def test_empty_comment_is_rejected(client, owner, doc_url):
    resp = client.post(f"{doc_url}/comments", json={"content": "  "}, headers=owner["headers"])
    assert resp.status_code == 400


def test_member_document_view_includes_history(client, owner, doc_url):
    resp = client.get(doc_url, headers=owner["headers"])
    assert resp.status_code == 200

    body = resp.get_json()
    assert body["role"] == "owner"
    assert body["comments"] == []
    assert [v["version"] for v in body["versions"]] == [1]
    assert "<h1>Welcome</h1>" in body["document"]["html"]


def test_private_workspace_is_hidden_from_outsiders(app, client, make_user, workspace_setup, doc_url):
    stranger = make_user("stranger@example.com")
    anonymous = app.test_client()
    ws = workspace_setup["workspace"]["slug"]

    assert anonymous.get(f"{API}/w/{ws}").status_code == 404
    assert anonymous.get(doc_url).status_code == 404
    assert client.get(f"{API}/w/{ws}", headers=stranger["headers"]).status_code == 404


def test_public_workspace_shows_published_documents_only(app, client, owner, workspace_setup, doc_url):
    ws = workspace_setup["workspace"]["slug"]
    _make_public(client, owner, workspace_setup)
    client.post(
        f"{API}/w/{ws}/collections/guides/documents",
        json={"title": "Released", "is_published": True},
        headers=owner["headers"],
    )
    anonymous = app.test_client()

    body = anonymous.get(f"{API}/w/{ws}").get_json()
    assert body["role"] is None
    assert [d["slug"] for d in body["collections"][0]["documents"]] == ["released"]

    assert anonymous.get(doc_url).status_code == 404

    released = anonymous.get(f"{API}/w/{ws}/docs/released")
    assert released.status_code == 200
    assert released.get_json()["role"] is None
    assert "comments" not in released.get_json()
    assert "versions" not in released.get_json()

    member_view = client.get(f"{API}/w/{ws}", headers=owner["headers"]).get_json()
    assert {d["slug"] for d in member_view["collections"][0]["documents"]} == {"getting-started", "released"}


def test_page_views_count_visitors(app, client, owner, workspace_setup, doc_url):
    _make_public(client, owner, workspace_setup)
    client.post(f"{doc_url}/publish", headers=owner["headers"])

    first_visitor = app.test_client()
    second_visitor = app.test_client()

    first_visitor.get(doc_url)
    first_visitor.get(doc_url)
    second_visitor.get(doc_url)

    stats = client.get(f"{doc_url}/stats", headers=owner["headers"]).get_json()
    assert stats["total_views"] == 3
    assert stats["unique_visitors"] == 2


def test_draft_reads_are_not_counted(client, owner, doc_url):
    client.get(doc_url, headers=owner["headers"])

    stats = client.get(f"{doc_url}/stats", headers=owner["headers"]).get_json()
    assert stats == {
        "document_id": stats["document_id"],
        "total_views": 0,
        "unique_visitors": 0,
    }


def test_versions_are_append_only(app, workspace_setup):
    with app.app_context():
        row = DocumentVersion.query.filter_by(document_id=workspace_setup["document"]["id"]).one()
        row.title = "Rewritten history"

        with pytest.raises(RuntimeError):
            db.session.commit()
        db.session.rollback()

        row = DocumentVersion.query.filter_by(document_id=workspace_setup["document"]["id"]).one()
        assert row.title == "Getting Started"


def test_duplicate_collection_slug_is_rejected(client, owner, workspace_setup):
    resp = client.post(
        f"{API}/w/{workspace_setup['workspace']['slug']}/collections",
        json={"name": "Guides"},
        headers=owner["headers"],
    )

    assert resp.status_code == 409
    assert resp.get_json() == {
        "error": "SlugConflict",
        "message": "A collection with this slug already exists in this workspace",
    }


def test_save_rejects_non_object_body(client, owner, doc_url):
    resp = client.put(doc_url, json=[{"version": 1}], headers=owner["headers"])
    assert resp.status_code == 400
    assert _versions(client, doc_url, owner)["current_version"] == 1


def test_taken_version_number_is_a_conflict(app, owner, workspace_setup):
    document_id = workspace_setup["document"]["id"]

    with app.app_context():
        db.session.add(DocumentVersion(
            document_id=document_id,
            version=2,
            title="Concurrent",
            content="written elsewhere",
            created_by=owner["id"],
        ))
        db.session.commit()

        document = db.session.get(Document, document_id)
        with pytest.raises(VersionConflict) as exc:
            save_document(
                document=document,
                actor_id=owner["id"],
                expected_version=1,
                data={"content": "lost edit"},
            )
        assert exc.value.current_version == 1

        document = db.session.get(Document, document_id)
        assert document.version == 1
        assert document.content == "# Welcome\n\nFirst draft."

        rows = DocumentVersion.query.filter_by(document_id=document_id).order_by(DocumentVersion.version).all()
        assert [(r.version, r.title) for r in rows] == [(1, "Getting Started"), (2, "Concurrent")]
