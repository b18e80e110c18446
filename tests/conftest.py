from typing import Generator

import pytest
from fastapi.testclient import TestClient

from domain.comments import Comment
from domain.post import Post
from main import app

EPOCH = "1970-01-01T00:00:00Z"


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Client with a fresh lifespan, so every test starts from empty repositories."""
    with TestClient(app) as test_client:
        yield test_client


def make_post(post_id: int, title: str = "t", content: str = "c") -> Post:
    return Post.model_validate({"Id": post_id, "Title": title, "Content": content, "CreationDate": EPOCH})


def make_comment(comment_id: int, post_id: int, text: str = "c", author: str = "a") -> Comment:
    return Comment.model_validate(
        {"Id": comment_id, "PostId": post_id, "Comment": text, "Author": author, "CreationDate": EPOCH}
    )
