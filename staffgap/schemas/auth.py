from pydantic import BaseModel

from staffgap.schemas.user import UserRead


# -------------------------------------------------------------------
# LOGIN REQUEST
# -------------------------------------------------------------------
class LoginRequest(BaseModel):
    username: str
    password: str


# -------------------------------------------------------------------
# REGISTER REQUESTS
# (Admin registers Deans; Admin or the faculty's Dean registers HODs)
# -------------------------------------------------------------------
class RegisterHodRequest(BaseModel):
    name: str
    username: str
    password: str
    department_id: int

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Dr. John Doe",
                    "username": "hod.hist@bosu.edu.ng",
                    "password": "password123",
                    "department_id": 106
                }
            ]
        }
    }


class RegisterDeanRequest(BaseModel):
    name: str
    username: str
    password: str
    faculty_id: int


# -------------------------------------------------------------------
# TOKEN RESPONSE
# -------------------------------------------------------------------
class TokenWithUser(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserRead


class ChangePasswordRequest(BaseModel):
    old_password: str
    new_password: str
