import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import or_, select
from sqlalchemy.orm import Session
from brewhouse.api.deps import SESSION_RUN_KEY, SESSION_USER_KEY, get_current_user, get_run_registry
from brewhouse.core.security import hash_password, verify_password
from brewhouse.db.session import get_db
from brewhouse.db.models import Brewery, User
from brewhouse.schemas.auth import LoginRequest, SignupRequest, UserOut
from brewhouse.sequencer.ticker import RunRegistry

log = logging.getLogger(__name__)

router = APIRouter()


def _end_session(request: Request, registry: RunRegistry) -> None:
    run_id = request.session.get(SESSION_RUN_KEY)
    if run_id:
        registry.discard(run_id)
    request.session.clear()


@router.post("/signup", response_model=UserOut, status_code=201)
def signup(req: SignupRequest, request: Request, db: Session = Depends(get_db)):
    taken = db.scalars(
        select(User).where(or_(User.username == req.user.username, User.email == req.user.email))
    ).first()
    if taken:
        raise HTTPException(status_code=409, detail="Username or email already registered")

    brewery = Brewery(**req.brewery.model_dump())
    db.add(brewery)
    db.flush()

    user = User(
        username=req.user.username,
        email=req.user.email,
        password_hash=hash_password(req.user.password),
        first_name=req.user.first_name,
        last_name=req.user.last_name,
        role="owner",
        brewery_id=brewery.id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    request.session[SESSION_USER_KEY] = user.id
    log.info("Brewery account created for %s", user.username, extra={"brewery_id": brewery.id})
    return UserOut.model_validate(user)


@router.post("/login", response_model=UserOut)
def login(
    req: LoginRequest,
    request: Request,
    db: Session = Depends(get_db),
    registry: RunRegistry = Depends(get_run_registry),
):
    user = db.scalars(select(User).where(User.username == req.username)).first()
    if not user or not verify_password(req.password, user.password_hash):
        log.warning("Failed login for %s", req.username)
        raise HTTPException(status_code=401, detail="Invalid username or password")

    _end_session(request, registry)
    request.session[SESSION_USER_KEY] = user.id
    log.info("User %s logged in", user.username, extra={"brewery_id": user.brewery_id or "-"})
    return UserOut.model_validate(user)


@router.post("/logout", status_code=204)
@router.post("/clear-session", status_code=204)
def logout(request: Request, registry: RunRegistry = Depends(get_run_registry)):
    _end_session(request, registry)
    return None


@router.get("/auth/user", response_model=UserOut)
def current_user(user: User = Depends(get_current_user)):
    return UserOut.model_validate(user)
