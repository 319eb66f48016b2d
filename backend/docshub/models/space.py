from docshub.extensions import db
from .base import BaseModel

class Space(BaseModel):
    __tablename__ = 'spaces'

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=True)
    owner_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    is_public = db.Column(db.Boolean, default=False, nullable=False)

    pages = db.relationship(
        "Page",
        back_populates="space",
        order_by="Page.order_index",
        cascade="all, delete-orphan"
    )
