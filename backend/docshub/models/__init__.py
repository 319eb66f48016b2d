# Import every model so db.create_all() and Flask-Migrate see the full schema.
from .user import User
from .audit_log import AuditLog
from .space import Space
from .page import Page
from .team import Team
from .team_member import TeamMember
from .workspace import Workspace, WORKSPACE_THEMES
from .collection import Collection
from .document import Document
from .document_version import DocumentVersion
from .comment import Comment
from .template import Template
from .page_view import PageView
