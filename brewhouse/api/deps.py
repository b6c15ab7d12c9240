from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session
from brewhouse.db.session import get_db
from brewhouse.db.models import User
from brewhouse.sequencer.ticker import RunRegistry

SESSION_USER_KEY = "user_id"
SESSION_RUN_KEY = "brew_run_id"


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    user = db.get(User, user_id)
    if not user:
        # account removed since the cookie was issued
        request.session.clear()
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def get_brewery_id(user: User = Depends(get_current_user)) -> str:
    if not user.brewery_id:
        raise HTTPException(status_code=403, detail="User is not attached to a brewery")
    return user.brewery_id


def get_run_registry(request: Request) -> RunRegistry:
    return request.app.state.run_registry
