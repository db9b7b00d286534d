"""
Authentication endpoints
"""
import logging
from fastapi import APIRouter, Request, HTTPException, Depends
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from app.core.database import get_db
from app.core.config import settings
from app.core.security import hash_password, verify_password, start_session, verify_user_session
from app.models import User, Theme
from app.schemas import RegisterRequest, LoginRequest
from app.utils.responses import fill_user_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", status_code=201)
async def register(body: RegisterRequest, db: Session = Depends(get_db)):
    """
    Create a user and their theme
    """
    reserved = [n.strip() for n in settings.RESERVED_USER_NAMES.split(",") if n.strip()]
    if body.name in reserved:
        raise HTTPException(status_code=400, detail="the username is reserved")

    try:
        user = User(
            name=body.name,
            display_name=body.display_name,
            description=body.description,
            password=hash_password(body.password),
        )
        db.add(user)
        db.flush()

        db.add(Theme(user_id=user.id, dark_mode=body.theme.dark_mode))
        db.flush()

        response = fill_user_response(db, user.id)
        db.commit()
    except IntegrityError:
        # duplicate users.name
        db.rollback()
        logger.info(f"Registration rejected, name {body.name} is taken")
        raise HTTPException(status_code=409, detail="the username is already taken")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to register user {body.name}: {e}")
        raise HTTPException(status_code=500, detail=f"failed to insert user: {e}")

    return response


@router.post("/login")
async def login(request: Request, body: LoginRequest, db: Session = Depends(get_db)):
    """
    Password login; stores the user in the session cookie
    """
    user = db.query(User).filter(User.name == body.username).first()
    if not user or not verify_password(body.password, user.password):
        raise HTTPException(status_code=401, detail="invalid username or password")

    expires = start_session(request, user.id, user.name)
    return {"success": True, "user_id": user.id, "expires_at": expires}


@router.post("/logout")
async def logout(request: Request):
    """
    Logout current user
    """
    request.session.clear()
    return {"success": True}


@router.get("/user/me")
async def get_me(user_id: int = Depends(verify_user_session), db: Session = Depends(get_db)):
    """
    Get current logged-in user
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="not found user that has the userid in session")

    return fill_user_response(db, user.id)
