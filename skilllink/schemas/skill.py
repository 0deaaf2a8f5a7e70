from typing import Optional

from pydantic import field_validator

from skilllink.models.skill import SkillLevel
from skilllink.schemas.base import CamelModel

# ======================
# SKILL SCHEMAS
# ======================

class Skill(CamelModel):
    skill_id: int
    name: str
    is_predefined: bool = False


class AddSkillRequest(CamelModel):
    # Defaults to the caller when omitted.
    user_id: Optional[int] = None
    skill_name: str
    level: SkillLevel = SkillLevel.BEGINNER

    @field_validator("skill_name")
    @classmethod
    def clean_skill_name(cls, value: str) -> str:
        cleaned = (value or "").strip()
        if not cleaned:
            raise ValueError("must not be blank")
        return cleaned


# ======================
# USER_SKILL SCHEMAS
# ======================

class UserSkill(CamelModel):
    user_skill_id: int
    user_id: int
    skill_id: int
    level: str
    skill: Skill


def to_skill(skill) -> Skill:
    return Skill(skill_id=skill.id, name=skill.name, is_predefined=bool(skill.is_predefined))


def to_user_skill(user_skill) -> UserSkill:
    return UserSkill(
        user_skill_id=user_skill.id,
        user_id=user_skill.user_id,
        skill_id=user_skill.skill_id,
        level=user_skill.level,
        skill=to_skill(user_skill.skill),
    )
