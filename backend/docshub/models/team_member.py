from docshub.extensions import db
from docshub.domain.roles import TeamRole
from .base import BaseModel

class TeamMember(BaseModel):
    __tablename__ = "team_members"

    team_id = db.Column(db.String(36), db.ForeignKey("teams.id"), nullable=False, index=True)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    role = db.Column(
        db.Enum(TeamRole, values_callable=lambda roles: [r.value for r in roles], name="team_role"),
        nullable=False,
        default=TeamRole.VIEWER
    )

    __table_args__ = (
        db.UniqueConstraint("team_id", "user_id", name="uq_team_member"),
    )

    team = db.relationship("Team", back_populates="members")
    user = db.relationship("User")
