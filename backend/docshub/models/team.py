from docshub.extensions import db
from .base import BaseModel

class Team(BaseModel):
    __tablename__ = "teams"

    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    avatar_url = db.Column(db.String(512), nullable=True)

    members = db.relationship(
        "TeamMember",
        back_populates="team",
        order_by="TeamMember.created_at",
        cascade="all, delete-orphan"
    )
    workspaces = db.relationship(
        "Workspace",
        back_populates="team",
        order_by="Workspace.created_at"
    )
