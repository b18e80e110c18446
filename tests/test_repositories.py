from concurrent.futures import ThreadPoolExecutor

import pytest

from conftest import make_comment, make_post
from repository.comments import CommentRepository
from repository.errors import DuplicateIdError, NotFoundError, RepositoryError
from repository.posts import PostRepository


class TestPostRepository:

    def test_insert_then_get_returns_same_post(self):
        repo = PostRepository()
        post = make_post(2, title="", content="")
        repo.insert(post)
        assert repo.get_by_id(2) == post

    def test_duplicate_insert_keeps_first(self):
        repo = PostRepository()
        repo.insert(make_post(1, title="first"))
        with pytest.raises(DuplicateIdError) as exc_info:
            repo.insert(make_post(1, title="second"))
        assert str(exc_info.value) == "Post with id: 1 already exists in the database"
        assert repo.get_by_id(1).title == "first"
        assert repo.count() == 1

    def test_get_missing_raises_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            PostRepository().get_by_id(35)
        assert isinstance(exc_info.value, RepositoryError)
        assert exc_info.value.entity_id == 35

    def test_concurrent_distinct_inserts_all_succeed(self):
        repo = PostRepository()
        ids = range(1, 501)
        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(lambda i: repo.insert(make_post(i)), ids))
        assert repo.count() == 500
        for i in ids:
            assert repo.get_by_id(i).id == i

    def test_concurrent_same_id_inserts_have_one_winner(self):
        repo = PostRepository()

        def attempt(n):
            try:
                repo.insert(make_post(9, title=str(n)))
                return True
            except DuplicateIdError:
                return False

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(attempt, range(100)))
        assert results.count(True) == 1
        assert repo.count() == 1


class TestCommentRepository:

    def test_get_all_by_post_id_filters_and_keeps_order(self):
        repo = CommentRepository()
        for comment_id, post_id in [(1, 101), (2, 7), (3, 101), (5, 101)]:
            repo.insert(make_comment(comment_id, post_id))
        assert [c.id for c in repo.get_all_by_post_id(101)] == [1, 3, 5]
        assert [c.id for c in repo.get_all_by_post_id(7)] == [2]

    def test_get_all_by_post_id_without_matches_is_empty(self):
        assert CommentRepository().get_all_by_post_id(404) == []

    def test_duplicate_insert_raises(self):
        repo = CommentRepository()
        repo.insert(make_comment(30, 1))
        with pytest.raises(DuplicateIdError) as exc_info:
            repo.insert(make_comment(30, 2))
        assert str(exc_info.value) == "Comment with id: 30 already exists in the database"
        assert repo.get_all_by_post_id(2) == []
