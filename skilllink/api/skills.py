from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from skilllink import models
from skilllink.crud import skill as crud_skill
from skilllink.database import get_db
from skilllink.schemas.skill import AddSkillRequest, Skill, UserSkill, to_skill, to_user_skill
from skilllink.schemas.user import PublicUser, to_public_user
from skilllink.utils.security import ensure_self_or_admin, get_current_user

router = APIRouter(prefix="/skills", tags=["Skills"])


# ======================
# POST: Add skill to a user (creates the catalog entry on first use)
# ======================
@router.post("/add")
def add_skill(
    payload: AddSkillRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user_id = payload.user_id if payload.user_id is not None else current_user.id
    ensure_self_or_admin(current_user, user_id, "manage skills")

    user_skill = crud_skill.add_user_skill(db, user_id, payload.skill_name, payload.level.value)
    return {
        "message": "Skill added successfully",
        "skill": to_user_skill(user_skill),
    }


# ======================
# DELETE: Remove a user's skill link
# ======================
@router.delete("/{user_id}/{skill_id}")
def delete_skill(
    user_id: int,
    skill_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    ensure_self_or_admin(current_user, user_id, "manage skills")
    crud_skill.delete_user_skill(db, user_id, skill_id)
    return {"message": "Skill deleted successfully"}


# ======================
# GET: Skills of a user
# ======================
@router.get("/user/{user_id}", response_model=List[UserSkill])
def get_user_skills(user_id: int, db: Session = Depends(get_db)):
    return [to_user_skill(us) for us in crud_skill.get_user_skills(db, user_id)]


# ======================
# GET: Autocomplete
# ======================
@router.get("/suggest", response_model=List[Skill])
def suggest_skills(q: str = Query(""), db: Session = Depends(get_db)):
    return [to_skill(s) for s in crud_skill.suggest_skills(db, q)]


# ======================
# GET: Users by skill prefix
# ======================
@router.get("/filter", response_model=List[PublicUser])
def filter_users_by_skill(skill: str = Query(""), db: Session = Depends(get_db)):
    return [to_public_user(u) for u in crud_skill.get_users_by_skill(db, skill)]
