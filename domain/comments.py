from pydantic import Field, StrictInt, StrictStr

from domain.base import MAX_ENTITY_ID, Entity, Timestamp


class Comment(Entity):
    # Zero is the "absent" id and never reaches a repository
    id: StrictInt = Field(alias="Id", gt=0, le=MAX_ENTITY_ID)
    post_id: StrictInt = Field(alias="PostId", ge=0, le=MAX_ENTITY_ID)  # not checked against stored posts
    comment: StrictStr = Field(alias="Comment")
    author: StrictStr = Field(alias="Author")
    creation_date: Timestamp = Field(alias="CreationDate")
