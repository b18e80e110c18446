from typing import Optional

from domain.post import Post
from repository.errors import DuplicateIdError, NotFoundError
from repository.storage import StorageMap


class PostRepository:
    def __init__(self, storage: Optional[StorageMap[Post]] = None) -> None:
        self._storage: StorageMap[Post] = storage if storage is not None else StorageMap()

    def insert(self, post: Post) -> None:
        if not self._storage.insert_if_absent(post.id, post):
            raise DuplicateIdError("Post", post.id)

    def get_by_id(self, post_id: int) -> Post:
        post = self._storage.get(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    def count(self) -> int:
        return len(self._storage)
