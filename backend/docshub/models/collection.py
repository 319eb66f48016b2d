from docshub.extensions import db
from .base import BaseModel

class Collection(BaseModel):
    __tablename__ = "collections"

    workspace_id = db.Column(db.String(36), db.ForeignKey("workspaces.id"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    icon = db.Column(db.String(32), nullable=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (
        db.UniqueConstraint("workspace_id", "slug", name="uq_collection_slug_per_workspace"),
    )

    workspace = db.relationship("Workspace", back_populates="collections")
    documents = db.relationship(
        "Document",
        back_populates="collection",
        order_by="Document.order_index"
    )
