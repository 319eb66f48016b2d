from docshub.extensions import db
from .base import BaseModel

class Page(BaseModel):
    __tablename__ = 'pages'

    space_id = db.Column(db.String(36), db.ForeignKey("spaces.id"), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    content = db.Column(db.Text, nullable=False, default="")
    parent_id = db.Column(db.String(36), db.ForeignKey("pages.id"), nullable=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)
    is_published = db.Column(db.Boolean, nullable=False, default=False, index=True)
    created_by = db.Column(db.String(36), nullable=False)

    __table_args__ = (
        db.UniqueConstraint("space_id", "slug", name="uq_page_slug_per_space"),
        db.Index("idx_page_space_order", "space_id", "order_index"),
    )

    space = db.relationship("Space", back_populates="pages")
