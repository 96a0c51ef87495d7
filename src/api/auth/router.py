from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from ...utils.auth import hash_password, verify_password, create_access_token, get_current_user
from ...utils.errors import ApiError
from ...database.db import get_db
from ...models.user import User
from ...schemas.common import ApiResponse
from ...schemas.user import UserCreate, LoginRequest, TokenResponse, User as UserSchema
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")

@router.post("/register", response_model=ApiResponse[UserSchema], status_code=201)
def register(request: UserCreate, db: Session = Depends(get_db)):
    email = request.email.lower()
    if db.query(User).filter(User.email == email).first():
        logger.warning(f"Registration rejected, email already in use: {email}")
        raise HTTPException(status_code=409, detail="Email already registered")

    user = User(email=email, name=request.name, password_hash=hash_password(request.password))
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create user: {str(e)}")
        raise ApiError(status_code=500, message="Failed to create user")

    logger.info(f"User registered: {user.id}")
    return {"error": False, "message": "User created successfully", "data": user}

@router.post("/login", response_model=ApiResponse[TokenResponse])
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == request.email.lower()).first()
    if not user or not verify_password(request.password, user.password_hash):
        logger.warning(f"Failed login for {request.email}")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token, expires_at = create_access_token({"sub": user.id, "email": user.email})

    return {
        "error": False,
        "message": "Login successful",
        "data": {"token": token, "expires_at": expires_at, "user": user}
    }

@router.get("/me", response_model=ApiResponse[UserSchema])
def me(user: User = Depends(get_current_user)):
    return {"error": False, "message": "User found", "data": user}
