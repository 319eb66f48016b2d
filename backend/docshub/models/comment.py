from docshub.extensions import db
from .base import BaseModel

class Comment(BaseModel):
    __tablename__ = "comments"

    document_id = db.Column(db.String(36), db.ForeignKey("documents.id"), nullable=False, index=True)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False)
    content = db.Column(db.Text, nullable=False)
    resolved = db.Column(db.Boolean, nullable=False, default=False)

    user = db.relationship("User")
