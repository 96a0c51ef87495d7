from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy import and_, or_
from sqlalchemy.sql import func
from typing import Annotated
from ...database.db import get_db
from ...models.user import User
from ...models.gpt import Gpt
from ...schemas.common import ApiResponse, Page, PageOptions
from ...schemas.gpt import Gpt as GptSchema, GptCreate, GptUpdate
from ...utils.auth import get_current_user
from ...utils.errors import ApiError
from ...utils.pagination import paginate
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gpts")

SORTABLE_COLUMNS = ["name", "goal", "temperature", "created_at"]

def _visible_query(db: Session, user: User):
    return db.query(Gpt).filter(
        and_(
            Gpt.deleted_at.is_(None),
            or_(Gpt.user_id == user.id, Gpt.is_public.is_(True))
        )
    )

def _get_owned(db: Session, user: User, gpt_id: str) -> Gpt:
    gpt = db.query(Gpt).filter(
        and_(Gpt.id == gpt_id, Gpt.user_id == user.id, Gpt.deleted_at.is_(None))
    ).first()
    if not gpt:
        raise HTTPException(status_code=404, detail="GPT not found")
    return gpt

def _ensure_unique_name(db: Session, user: User, name: str, exclude_id: str = None):
    query = db.query(Gpt).filter(
        and_(Gpt.user_id == user.id, Gpt.name == name, Gpt.deleted_at.is_(None))
    )
    if exclude_id:
        query = query.filter(Gpt.id != exclude_id)
    if query.first():
        logger.warning(f"GPT name clash for {user.id}: {name}")
        raise HTTPException(status_code=409, detail="You already have a GPT with this name")

def _commit(db: Session, action: str):
    try:
        db.commit()
    except IntegrityError as e:
        # a concurrent request took the name between the check and the commit
        db.rollback()
        logger.warning(f"GPT name clash on {action}: {str(e)}")
        raise HTTPException(status_code=409, detail="You already have a GPT with this name")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to {action} GPT: {str(e)}")
        raise ApiError(status_code=500, message=f"Failed to {action} GPT")

@router.post("", response_model=ApiResponse[GptSchema], status_code=201)
def create_gpt(request: GptCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    _ensure_unique_name(db, user, request.name)

    gpt = Gpt(user_id=user.id, **request.model_dump())
    db.add(gpt)
    _commit(db, "create")
    db.refresh(gpt)

    logger.info(f"GPT {gpt.id} created for {user.id}")
    return {"error": False, "message": "GPT created successfully", "data": gpt}

@router.get("", response_model=ApiResponse[Page[GptSchema]])
def get_gpts(
    options: Annotated[PageOptions, Query()],
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    query = _visible_query(db, user)

    if options.search:
        pattern = f"%{options.search}%"
        query = query.filter(or_(
            Gpt.name.ilike(pattern),
            Gpt.description.ilike(pattern),
            Gpt.goal.ilike(pattern)
        ))

    page = paginate(query, Gpt, options, SORTABLE_COLUMNS, GptSchema)
    return {"error": False, "message": "GPTs found", "data": page}

@router.get("/{gpt_id}", response_model=ApiResponse[GptSchema])
def get_gpt(gpt_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    gpt = _visible_query(db, user).filter(Gpt.id == gpt_id).first()
    if not gpt:
        raise HTTPException(status_code=404, detail="GPT not found")
    return {"error": False, "message": "GPT found", "data": gpt}

@router.put("/{gpt_id}", response_model=ApiResponse[GptSchema])
def update_gpt(
    gpt_id: str,
    request: GptUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    gpt = _get_owned(db, user, gpt_id)
    changes = request.model_dump(exclude_unset=True, exclude_none=True)

    if "name" in changes:
        _ensure_unique_name(db, user, changes["name"], exclude_id=gpt.id)

    for field, value in changes.items():
        setattr(gpt, field, value)

    _commit(db, "update")
    db.refresh(gpt)

    logger.info(f"GPT {gpt.id} updated")
    return {"error": False, "message": "GPT updated successfully", "data": gpt}

@router.delete("/{gpt_id}", response_model=ApiResponse[None])
def delete_gpt(gpt_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    gpt = _get_owned(db, user, gpt_id)
    gpt.deleted_at = func.current_timestamp()
    _commit(db, "delete")

    logger.info(f"GPT {gpt_id} deleted")
    return {"error": False, "message": "GPT deleted successfully"}
