from docshub.extensions import db
from .base import BaseModel

WORKSPACE_THEMES = {"default", "dark", "minimal"}

class Workspace(BaseModel):
    __tablename__ = "workspaces"

    team_id = db.Column(db.String(36), db.ForeignKey("teams.id"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    icon = db.Column(db.String(32), nullable=True, default="📚")
    is_public = db.Column(db.Boolean, nullable=False, default=False)
    theme = db.Column(db.JSON, nullable=False, default="default")
    custom_domain = db.Column(db.String(255), nullable=True)

    team = db.relationship("Team", back_populates="workspaces")
    collections = db.relationship(
        "Collection",
        back_populates="workspace",
        order_by="Collection.order_index",
        cascade="all, delete-orphan"
    )
