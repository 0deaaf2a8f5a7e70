from pydantic import BaseModel, EmailStr
from typing import Optional

from skilllink.schemas.base import CamelModel

# ======================
# TOKEN SCHEMAS
# ======================

class Token(BaseModel):
    token: str
    token_type: str = "bearer"
    role: str

class TokenData(BaseModel):
    user_id: Optional[int] = None
    role: Optional[str] = None


# ======================
# USER AUTHENTICATION SCHEMAS
# ======================

class LoginRequest(BaseModel):
    email: EmailStr
    password: str


# ======================
# ACCOUNT TOGGLES
# ======================

class TeachModeUpdate(CamelModel):
    ready_to_teach: bool

class ActiveUpdate(CamelModel):
    is_active: bool

class RoleUpdate(CamelModel):
    role: str = "Learner"
