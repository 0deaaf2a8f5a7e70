import logging
from typing import List

from sqlalchemy.orm import Session

from skilllink import models
from skilllink.crud.filters import LIKE_ESCAPE, like_prefix

logger = logging.getLogger(__name__)

SUGGESTION_LIMIT = 10


# ============================
# SKILL TABLE
# ============================

def get_skill_by_name(db: Session, name: str):
    # Exact, case-sensitive match.
    return db.query(models.Skill).filter(models.Skill.name == name).first()


def get_or_create_skill(db: Session, name: str) -> models.Skill:
    skill = get_skill_by_name(db, name)
    if skill:
        return skill
    skill = models.Skill(name=name, is_predefined=False)
    db.add(skill)
    db.flush()
    return skill


def suggest_skills(db: Session, prefix: str) -> List[models.Skill]:
    return (
        db.query(models.Skill)
        .filter(models.Skill.name.ilike(like_prefix(prefix.strip()), escape=LIKE_ESCAPE))
        .order_by(models.Skill.name.asc())
        .limit(SUGGESTION_LIMIT)
        .all()
    )


# ============================
# USER SKILLS
# ============================

def add_user_skill(db: Session, user_id: int, skill_name: str, level: str) -> models.UserSkill:
    """Link ``skill_name`` to the user, creating the skill if needed; re-adding updates the level."""
    skill = get_or_create_skill(db, skill_name)

    user_skill = db.query(models.UserSkill).filter(
        models.UserSkill.user_id == user_id,
        models.UserSkill.skill_id == skill.id,
    ).first()

    if user_skill:
        user_skill.level = level
    else:
        user_skill = models.UserSkill(user_id=user_id, skill_id=skill.id, level=level)
        db.add(user_skill)

    db.commit()
    db.refresh(user_skill)
    logger.info("User %s skill '%s' level=%s", user_id, skill.name, level)
    return user_skill


def get_user_skills(db: Session, user_id: int) -> List[models.UserSkill]:
    return (
        db.query(models.UserSkill)
        .join(models.Skill, models.Skill.id == models.UserSkill.skill_id)
        .filter(models.UserSkill.user_id == user_id)
        .order_by(models.Skill.name.asc())
        .all()
    )


def delete_user_skill(db: Session, user_id: int, skill_id: int) -> int:
    deleted = db.query(models.UserSkill).filter(
        models.UserSkill.user_id == user_id,
        models.UserSkill.skill_id == skill_id,
    ).delete(synchronize_session=False)
    db.commit()
    return int(deleted)


def get_users_by_skill(db: Session, prefix: str) -> List[models.User]:
    """Distinct users holding a skill whose name starts with ``prefix``."""
    return (
        db.query(models.User)
        .join(models.UserSkill, models.UserSkill.user_id == models.User.id)
        .join(models.Skill, models.Skill.id == models.UserSkill.skill_id)
        .filter(models.Skill.name.ilike(like_prefix(prefix.strip()), escape=LIKE_ESCAPE))
        .distinct()
        .order_by(models.User.id.asc())
        .limit(SUGGESTION_LIMIT)
        .all()
    )
