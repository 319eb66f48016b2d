from docshub.extensions import db
from .base import BaseModel

class Document(BaseModel):
    __tablename__ = "documents"

    collection_id = db.Column(db.String(36), db.ForeignKey("collections.id"), nullable=False, index=True)
    parent_id = db.Column(db.String(36), db.ForeignKey("documents.id"), nullable=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, index=True)
    content = db.Column(db.Text, nullable=False, default="")
    excerpt = db.Column(db.String(500), nullable=True)
    icon = db.Column(db.String(32), nullable=True, default="📄")
    order_index = db.Column(db.Integer, nullable=False, default=0)
    is_published = db.Column(db.Boolean, nullable=False, default=False, index=True)
    template = db.Column(db.String(36), nullable=True)

    # Bumped on every content save; guards edits with WHERE version = expected
    version = db.Column(db.Integer, nullable=False, default=1)

    created_by = db.Column(db.String(36), nullable=False)
    updated_by = db.Column(db.String(36), nullable=True)
    published_at = db.Column(db.DateTime(timezone=True), nullable=True)

    __table_args__ = (
        db.UniqueConstraint("collection_id", "slug", name="uq_document_slug_per_collection"),
        db.Index("idx_document_collection_order", "collection_id", "order_index"),
    )

    collection = db.relationship("Collection", back_populates="documents")
