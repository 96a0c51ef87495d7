from fastapi import HTTPException
from sqlalchemy.orm import Query
from ..schemas.common import PageMeta, PageOptions, SortOrder

def paginate(query: Query, model, options: PageOptions, sortable: list, schema) -> dict:
    """Sort, slice and count ``query`` according to ``options``.

    ``sortable`` whitelists the columns a client may order by; anything else
    is a 400. Without ``order_by`` rows are ordered by ``created_at``.
    """
    order_by = options.order_by or "created_at"
    if order_by not in sortable:
        raise HTTPException(status_code=400, detail=f"Invalid order_by field: {order_by}")

    column = getattr(model, order_by)
    query = query.order_by(column.desc() if options.order == SortOrder.DESC else column.asc())

    item_count = query.count()
    rows = query.limit(options.limit).offset(options.offset).all()

    return {
        "data": [schema.model_validate(row) for row in rows],
        "meta": PageMeta.build(item_count, options)
    }
