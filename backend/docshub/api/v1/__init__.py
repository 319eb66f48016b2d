from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import markdown_preview
from . import spaces
from . import public_docs
from . import teams
from . import audit
from . import workspaces
from . import documents
