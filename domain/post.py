from pydantic import Field, StrictInt, StrictStr

from domain.base import MAX_ENTITY_ID, Entity, Timestamp


class Post(Entity):
    id: StrictInt = Field(alias="Id", ge=0, le=MAX_ENTITY_ID)
    title: StrictStr = Field(alias="Title")
    content: StrictStr = Field(alias="Content")
    creation_date: Timestamp = Field(alias="CreationDate")
