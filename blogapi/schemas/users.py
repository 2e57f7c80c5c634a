from typing import Optional
from pydantic import BaseModel, ConfigDict

class UserIn(BaseModel):
    name: str
    username: str

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    username: str

class ActionOkOut(BaseModel):
    ok: bool = True
    message: Optional[str] = None
