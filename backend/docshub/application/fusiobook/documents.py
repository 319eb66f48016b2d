from typing import List
from docshub.models.collection import Collection
from docshub.models.comment import Comment
from docshub.models.document import Document
from docshub.models.document_version import DocumentVersion
from docshub.models.workspace import Workspace
from docshub.domain.invariants.exceptions import NotFound


def get_document(workspace: Workspace, doc_slug: str, *, published_only: bool = False) -> Document:
    """Look a document up by slug within one workspace's collections."""
    query = (
        Document.query
        .join(Collection, Document.collection_id == Collection.id)
        .filter(Collection.workspace_id == workspace.id, Document.slug == doc_slug)
    )
    if published_only:
        query = query.filter(Document.is_published.is_(True))

    # Slugs are unique per collection; the oldest match wins across collections
    document = query.order_by(Document.created_at.asc()).first()
    if not document:
        raise NotFound("Document not found")
    return document


def get_version(document: Document, version: int) -> DocumentVersion:
    row = DocumentVersion.query.filter_by(document_id=document.id, version=version).first()
    if not row:
        raise NotFound(f"Version {version} not found")
    return row


def list_versions(document: Document) -> List[DocumentVersion]:
    return (
        DocumentVersion.query
        .filter_by(document_id=document.id)
        .order_by(DocumentVersion.version.desc())
        .all()
    )


def list_comments(document: Document) -> List[Comment]:
    return (
        Comment.query
        .filter_by(document_id=document.id)
        .order_by(Comment.created_at.asc())
        .all()
    )


def list_root_documents(collection: Collection, *, published_only: bool = False) -> List[Document]:
    query = Document.query.filter_by(collection_id=collection.id, parent_id=None)
    if published_only:
        query = query.filter_by(is_published=True)
    return query.order_by(Document.order_index.asc()).all()


def list_collections(workspace: Workspace) -> List[Collection]:
    return (
        Collection.query
        .filter_by(workspace_id=workspace.id)
        .order_by(Collection.order_index.asc())
        .all()
    )
