from docshub.extensions import db

def compact_order(query, model, order_field="order_index"):
    """
    Re-assigns sequential order values (0..N-1) for a scoped query.
    """
    column = getattr(model, order_field)
    items = query.order_by(column.asc(), model.created_at.asc()).all()

    for index, item in enumerate(items):
        setattr(item, order_field, index)

    db.session.flush()
    return items


def next_order_index(query, model, order_field="order_index"):
    """Position after the current last sibling, 0 for the first one."""
    column = getattr(model, order_field)
    last = query.order_by(column.desc()).first()
    return (getattr(last, order_field) + 1) if last else 0
