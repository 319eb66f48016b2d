from docshub.domain.invariants.exceptions import NotFound, PermissionDenied
from docshub.models.page import Page
from docshub.models.space import Space


def get_owned_space(*, slug: str, user_id: str) -> Space:
    """Spaces are private to their owner outside the public docs site."""
    space = Space.query.filter_by(slug=slug).first()
    if not space:
        raise NotFound("Space not found")

    if space.owner_id != user_id:
        raise PermissionDenied("You do not have access to this space")

    return space


def get_space_page(*, space: Space, page_slug: str) -> Page:
    page = Page.query.filter_by(space_id=space.id, slug=page_slug).first()
    if not page:
        raise NotFound("Page not found")
    return page
