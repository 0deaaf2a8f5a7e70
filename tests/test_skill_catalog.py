from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from fastapi import HTTPException

from skilllink.api.skills import add_skill, delete_skill, filter_users_by_skill, suggest_skills
from skilllink.crud import skill as crud_skill
from skilllink.models import Skill, UserSkill
from skilllink.schemas.skill import AddSkillRequest


def test_add_skill_creates_catalog_entry_on_first_use(db_session, make_user):
    user = make_user()

    response = add_skill(
        AddSkillRequest(skillName=" Guitar ", level="Intermediate"),
        current_user=user,
        db=db_session,
    )

    assert response["message"] == "Skill added successfully"
    assert response["skill"].skill.name == "Guitar"
    assert response["skill"].level == "Intermediate"
    assert db_session.query(Skill).filter(Skill.name == "Guitar").count() == 1


def test_re_adding_a_skill_updates_level_without_duplicates(db_session, make_user):
    user = make_user()
    crud_skill.add_user_skill(db_session, user.id, "Guitar", "Beginner")
    crud_skill.add_user_skill(db_session, user.id, "Guitar", "Expert")

    rows = crud_skill.get_user_skills(db_session, user.id)

    assert len(rows) == 1
    assert rows[0].level == "Expert"


def test_two_users_share_one_skill_row(db_session, make_user):
    first = make_user()
    second = make_user()
    crud_skill.add_user_skill(db_session, first.id, "Guitar", "Beginner")
    crud_skill.add_user_skill(db_session, second.id, "Guitar", "Advanced")

    assert db_session.query(Skill).count() == 1
    assert db_session.query(UserSkill).count() == 2


def test_managing_another_users_skills_is_forbidden(db_session, make_user):
    user = make_user()
    other = make_user()

    with pytest.raises(HTTPException) as exc_info:
        add_skill(AddSkillRequest(userId=other.id, skillName="Piano"), current_user=user, db=db_session)

    assert exc_info.value.status_code == 403


def test_admin_may_manage_any_users_skills(db_session, make_user):
    admin = make_user(role="Admin")
    other = make_user()

    add_skill(AddSkillRequest(userId=other.id, skillName="Piano"), current_user=admin, db=db_session)

    assert [us.skill.name for us in crud_skill.get_user_skills(db_session, other.id)] == ["Piano"]


def test_delete_skill_removes_only_the_link(db_session, make_user):
    user = make_user()
    user_skill = crud_skill.add_user_skill(db_session, user.id, "Guitar", "Beginner")

    response = delete_skill(user.id, user_skill.skill_id, current_user=user, db=db_session)

    assert response == {"message": "Skill deleted successfully"}
    assert crud_skill.get_user_skills(db_session, user.id) == []
    assert db_session.query(Skill).count() == 1


def test_suggest_is_case_insensitive_prefix_match(db_session, make_user):
    user = make_user()
    for name in ("Guitar", "Guitar Repair", "Bass Guitar", "Piano"):
        crud_skill.add_user_skill(db_session, user.id, name, "Beginner")

    names = [s.name for s in suggest_skills(q="gui", db=db_session)]

    assert names == ["Guitar", "Guitar Repair"]


def test_suggest_treats_wildcards_literally(db_session, make_user):
    user = make_user()
    crud_skill.add_user_skill(db_session, user.id, "100% Python", "Beginner")
    crud_skill.add_user_skill(db_session, user.id, "1000 Words", "Beginner")

    names = [s.name for s in crud_skill.suggest_skills(db_session, "100%")]

    assert names == ["100% Python"]


def test_suggest_caps_results(db_session, make_user):
    user = make_user()
    for i in range(crud_skill.SUGGESTION_LIMIT + 3):
        crud_skill.add_user_skill(db_session, user.id, f"Skill {i:02d}", "Beginner")

    assert len(crud_skill.suggest_skills(db_session, "skill")) == crud_skill.SUGGESTION_LIMIT


def test_filter_returns_distinct_users_with_matching_skill(db_session, make_user):
    tutor = make_user(full_name="Theo Tutor", role="Tutor")
    other = make_user(full_name="Pia Pianist")
    crud_skill.add_user_skill(db_session, tutor.id, "Guitar", "Expert")
    crud_skill.add_user_skill(db_session, tutor.id, "Guitar Repair", "Advanced")
    crud_skill.add_user_skill(db_session, other.id, "Piano", "Expert")

    users = filter_users_by_skill(skill="guit", db=db_session)

    assert [u.user_id for u in users] == [tutor.id]
    assert users[0].full_name == "Theo Tutor"


def test_user_skills_endpoint_lists_by_skill_name(client, db_session, make_user):
    user = make_user()
    crud_skill.add_user_skill(db_session, user.id, "Piano", "Beginner")
    crud_skill.add_user_skill(db_session, user.id, "Drums", "Advanced")

    response = client.get(f"/api/skills/user/{user.id}")

    assert response.status_code == 200
    body = response.json()
    assert [row["skill"]["name"] for row in body] == ["Drums", "Piano"]
    assert body[0]["level"] == "Advanced"
