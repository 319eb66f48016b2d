from docshub.models.document_version import DocumentVersion


def initial_change_summary():
    return "Initial version"


def update_change_summary(version):
    return f"Updated to version {version}"


def restore_change_summary(from_version):
    return f"Restored from version {from_version}"


def snapshot_version(document, *, version, actor_id, change_summary=None):
    """
    Build the immutable history row for a document at `version`.
    The row carries the document's title and content as just written.
    """
    row = DocumentVersion()
    row.document_id = document.id
    row.version = version
    row.title = document.title
    row.content = document.content or ""
    row.created_by = actor_id
    row.change_summary = change_summary
    return row
