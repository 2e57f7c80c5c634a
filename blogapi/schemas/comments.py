from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from typing import Optional

class CommentIn(BaseModel):
    text: str
    post_id: int = Field(validation_alias=AliasChoices('postID', 'post_id'))
    user_id: Optional[int] = Field(default=None, validation_alias=AliasChoices('userID', 'user_id'))

class CommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    user_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices('userID', 'user_id'),
        serialization_alias='userID',
    )
    post_id: int = Field(
        validation_alias=AliasChoices('postID', 'post_id'),
        serialization_alias='postID',
    )
