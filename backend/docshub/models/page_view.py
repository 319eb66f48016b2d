from docshub.extensions import db
from .base import BaseModel, utc_now

class PageView(BaseModel):
    __tablename__ = "page_views"

    document_id = db.Column(db.String(36), db.ForeignKey("documents.id"), nullable=False, index=True)
    visitor_id = db.Column(db.String(64), nullable=False, index=True)
    user_id = db.Column(db.String(36), nullable=True)
    viewed_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utc_now)
