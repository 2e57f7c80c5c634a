from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from typing import List, Optional
from .comments import CommentOut

class PostIn(BaseModel):
    title: str
    content: str
    user_id: int = Field(validation_alias=AliasChoices('userID', 'user_id'))

class PostUpdateIn(BaseModel):
    """Partial body for PUT /posts/{id}; omitted fields keep their stored values."""
    title: Optional[str] = None
    content: Optional[str] = None
    user_id: Optional[int] = Field(default=None, validation_alias=AliasChoices('userID', 'user_id'))

class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    user_id: int = Field(
        validation_alias=AliasChoices('userID', 'user_id'),
        serialization_alias='userID',
    )

class PostWithCommentsOut(PostOut):
    comments: List[CommentOut] = []
