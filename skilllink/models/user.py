import enum

from sqlalchemy import Column, Integer, String, Boolean, Text, TIMESTAMP, func
from sqlalchemy.orm import relationship
from skilllink.database import Base


class Role(str, enum.Enum):
    LEARNER = "Learner"
    TUTOR = "Tutor"
    ADMIN = "Admin"


# ---------------- USER (AUTH + PROFILE TABLE) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=Role.LEARNER.value)
    bio = Column(Text)
    location = Column(String(150))
    profile_picture = Column(String(255))
    ready_to_teach = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    blocked_by_admin = Column(Boolean, default=False, nullable=False)
    email_verified = Column(Boolean, default=False, nullable=False)
    email_verification_token = Column(String(128), unique=True, index=True)
    email_verification_expires = Column(TIMESTAMP)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    user_skills = relationship("UserSkill", back_populates="user", cascade="all, delete-orphan")
    requests = relationship("Request", back_populates="learner", cascade="all, delete-orphan")
    acceptances = relationship("AcceptedRequest", back_populates="acceptor", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return (self.role or "") == Role.ADMIN.value
