# In routers/posts.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import ValidationError

from domain.comments import Comment
from domain.post import Post
from repository.comments import CommentRepository
from repository.errors import DuplicateIdError, NotFoundError
from repository.posts import PostRepository
from routers.responses import json_ack, json_error, json_payload, parse_id_path_variable

logger = logging.getLogger('uvicorn.error')

router = APIRouter(
    prefix="/api/posts",
    tags=["posts", "comments"]
)


# --- Dependencies ---
async def get_post_repository(request: Request) -> PostRepository:
    repo = getattr(request.app.state, 'post_repository', None)
    if repo is None:
        logger.error("Post repository not initialized or unavailable.")
        raise HTTPException(status_code=503, detail="Database service unavailable")
    return repo


async def get_comment_repository(request: Request) -> CommentRepository:
    repo = getattr(request.app.state, 'comment_repository', None)
    if repo is None:
        logger.error("Comment repository not initialized or unavailable.")
        raise HTTPException(status_code=503, detail="Database service unavailable")
    return repo


# --- Post API Routes ---
@router.post("")
async def add_post(
    request: Request,
    posts: PostRepository = Depends(get_post_repository)
) -> Response:
    try:
        post = Post.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning(f"Rejected post payload: {e.error_count()} validation error(s)")
        return json_error("400 Bad Request", status.HTTP_400_BAD_REQUEST)

    # Duplicates are reported as a 500 on this path, unlike comments
    try:
        posts.insert(post)
    except DuplicateIdError as e:
        logger.warning(f"Post with id {post.id} already exists.")
        return json_error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
    except Exception as e:
        logger.exception(f"Error inserting post {post.id}: {e}")
        return json_error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(f"Post {post.id} added ({posts.count()} stored).")
    return json_ack(f"post id: {post.id} successfully added")


@router.get("/{post_id}")
async def get_post_by_id(
    post_id: str,
    posts: PostRepository = Depends(get_post_repository)
) -> Response:
    parsed_id = parse_id_path_variable(post_id)
    if parsed_id is None:
        logger.warning(f"Invalid post id path variable: {post_id!r}")
        return json_error(f"wrong id path variable: {post_id}", status.HTTP_400_BAD_REQUEST)

    try:
        post = posts.get_by_id(parsed_id)
    except NotFoundError:
        logger.warning(f"Post with ID {post_id} not found.")
        return json_error(f"Post with id: {post_id} does not exist", status.HTTP_404_NOT_FOUND)

    return json_payload(post.to_json())


# --- Comment API Routes ---
@router.get("/comments/{post_id}")
async def get_comments_by_post_id(
    post_id: str,
    comments: CommentRepository = Depends(get_comment_repository)
) -> Response:
    parsed_id = parse_id_path_variable(post_id)
    # Zero is never a valid post id here, as opposed to an id with no comments
    if parsed_id is None or parsed_id == 0:
        logger.warning(f"Invalid comments post id path variable: {post_id!r}")
        return json_error(f"wrong id path variable: {post_id}", status.HTTP_400_BAD_REQUEST)

    return json_payload([c.to_json() for c in comments.get_all_by_post_id(parsed_id)])


@router.post("/comments")
async def add_comment(
    request: Request,
    comments: CommentRepository = Depends(get_comment_repository)
) -> Response:
    try:
        comment = Comment.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning(f"Rejected comment payload: {e.error_count()} validation error(s)")
        return json_error("could not deserialize comment json payload", status.HTTP_400_BAD_REQUEST)

    try:
        comments.insert(comment)
    except DuplicateIdError as e:
        logger.warning(f"Comment with id {comment.id} already exists.")
        return json_error(str(e), status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.exception(f"Error inserting comment {comment.id} on post {comment.post_id}: {e}")
        return json_error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(f"Comment {comment.id} added to post {comment.post_id}.")
    return json_ack(f"comment id: {comment.id} successfully added")
