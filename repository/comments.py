from typing import List, Optional

from domain.comments import Comment
from repository.errors import DuplicateIdError
from repository.storage import StorageMap


class CommentRepository:
    def __init__(self, storage: Optional[StorageMap[Comment]] = None) -> None:
        self._storage: StorageMap[Comment] = storage if storage is not None else StorageMap()

    def insert(self, comment: Comment) -> None:
        if not self._storage.insert_if_absent(comment.id, comment):
            raise DuplicateIdError("Comment", comment.id)

    def get_all_by_post_id(self, post_id: int) -> List[Comment]:
        """Comments attached to ``post_id`` in the order they were added. Never raises on a miss."""
        return [c for c in self._storage.values() if c.post_id == post_id]

    def count(self) -> int:
        return len(self._storage)
