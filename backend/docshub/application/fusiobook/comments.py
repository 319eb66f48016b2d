from docshub.extensions import db
from docshub.models.comment import Comment
from docshub.models.document import Document
from docshub.domain.invariants.exceptions import NotFound
from docshub.domain.invariants.resource import require_text
from docshub.utils.audit import log_action
from docshub.utils.transaction import transactional


def get_comment(document: Document, comment_id: str) -> Comment:
    comment = Comment.query.filter_by(id=comment_id, document_id=document.id).first()
    if not comment:
        raise NotFound("Comment not found")
    return comment


def add_comment(*, document: Document, actor_id: str, content: str) -> Comment:
    comment = Comment()
    comment.document_id = document.id
    comment.user_id = actor_id
    comment.content = require_text(content, "Comment")
    comment.resolved = False

    with transactional():
        db.session.add(comment)
        db.session.flush()

        log_action(
            action="comment.create",
            entity_type="comment",
            entity_id=comment.id,
            actor_id=actor_id,
            team_id=document.collection.workspace.team_id,
            payload={"document_id": document.id},
        )

    return comment


def set_comment_resolved(
    *,
    document: Document,
    comment: Comment,
    actor_id: str,
    resolved: bool,
) -> Comment:
    with transactional():
        comment.resolved = bool(resolved)

        log_action(
            action="comment.resolve" if resolved else "comment.reopen",
            entity_type="comment",
            entity_id=comment.id,
            actor_id=actor_id,
            team_id=document.collection.workspace.team_id,
            payload={"document_id": document.id},
        )

    return comment
