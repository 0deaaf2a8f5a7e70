# skilllink/api/admin.py
"""
Admin endpoints for user management: search, block/unblock, role changes
and deletion.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from skilllink import models
from skilllink.crud import user as crud_user
from skilllink.database import get_db
from skilllink.schemas.auth import ActiveUpdate, RoleUpdate
from skilllink.schemas.user import AdminUserView, to_admin_view
from skilllink.utils.security import get_current_user

router = APIRouter(prefix="/admin", tags=["Admin"])


# ─────────────────────────────────────────
# HELPER: Enforce admin access
# ─────────────────────────────────────────
def require_admin(current_user: models.User = Depends(get_current_user)):
    if not current_user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return current_user


def _get_user_or_404(db: Session, user_id: int) -> models.User:
    user = crud_user.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


# ─────────────────────────────────────────
# GET /admin/users: List all users
# ─────────────────────────────────────────
@router.get("/users", response_model=List[AdminUserView])
def get_users(
    q: Optional[str] = Query(None, description="Search by name or email"),
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return [to_admin_view(u) for u in crud_user.list_users(db, q)]


# ─────────────────────────────────────────
# PUT /admin/users/{user_id}/active: Block / unblock
# ─────────────────────────────────────────
@router.put("/users/{user_id}/active")
def set_user_active(
    user_id: int,
    payload: ActiveUpdate,
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    user = _get_user_or_404(db, user_id)
    crud_user.set_active(db, user, payload.is_active, by_admin=True)
    return {"message": "Updated", "isActive": user.is_active}


# ─────────────────────────────────────────
# PUT /admin/users/{user_id}/role: Promote / demote
# ─────────────────────────────────────────
@router.put("/users/{user_id}/role")
def set_user_role(
    user_id: int,
    payload: RoleUpdate,
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    user = _get_user_or_404(db, user_id)
    crud_user.set_role(db, user, payload.role)
    return {"message": "Updated", "role": user.role}


# ─────────────────────────────────────────
# DELETE /admin/users/{user_id}
# ─────────────────────────────────────────
@router.delete("/users/{user_id}")
def delete_user(
    user_id: int,
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    if user_id == admin.id:
        raise HTTPException(status_code=400, detail="Admins cannot delete their own account")
    user = _get_user_or_404(db, user_id)
    crud_user.delete_user(db, user)
    return {"message": "User deleted!"}
