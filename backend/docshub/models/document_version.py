from docshub.extensions import db
from sqlalchemy import event
from .base import BaseModel

class DocumentVersion(BaseModel):
    __tablename__ = "document_versions"

    document_id = db.Column(
        db.String(36),
        db.ForeignKey("documents.id"),
        nullable=False
    )

    version = db.Column(db.Integer, nullable=False)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False, default="")
    change_summary = db.Column(db.String(255), nullable=True)

    created_by = db.Column(db.String(36), nullable=False)

    __table_args__ = (
        db.UniqueConstraint("document_id", "version", name="uq_document_version"),
        db.Index("idx_document_version_document", "document_id"),
    )


@event.listens_for(DocumentVersion, 'before_update')
@event.listens_for(DocumentVersion, 'before_delete')
def prevent_version_mutation(mapper, connection, target):
    raise RuntimeError("Document versions are append-only")
