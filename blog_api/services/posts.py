"""Post service for listing and author-only mutations."""

import logging
import math

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, contains_eager

from blog_api.exceptions import Forbidden, NotFound
from blog_api.models.post import Post
from blog_api.models.user import User
from blog_api.schemas.auth import Identity
from blog_api.schemas.post import Pagination

logger = logging.getLogger(__name__)


class PostService:
    """Service for post-related operations.

    Existence and ownership are checked with a read before each mutation.
    The checks are not atomic with the write that follows, and there is no
    locking: a post removed in between is not detected by the check.
    """

    def __init__(self, db: Session):
        self.db = db

    def _with_author(self):
        return self.db.query(Post).join(Post.author).options(contains_eager(Post.author))

    def list_posts(self, page: int = 1, limit: int = 10) -> tuple[list[Post], Pagination]:
        """Return one page of posts, newest first, with pagination metadata."""
        # Counted over the same join as the page so both agree
        total = (
            self.db.query(func.count(Post.id)).select_from(Post).join(Post.author).scalar() or 0
        )
        posts = (
            self._with_author()
            .order_by(Post.created_at.desc(), Post.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        pagination = Pagination(
            current_page=page,
            total_pages=math.ceil(total / limit),
            total_posts=total,
            limit=limit,
        )
        return posts, pagination

    def get_post(self, post_id: int) -> Post:
        post = self._with_author().filter(Post.id == post_id).first()
        if post is None:
            raise NotFound("Post not found")
        return post

    def create_post(self, identity: Identity, title: str, content: str) -> Post:
        """Insert a post authored by the identity.

        A token can outlive its user; such an identity has no author row and
        the post is rejected, by the lookup or by the foreign key.
        """
        if self.db.query(User.id).filter(User.id == identity.user_id).first() is None:
            raise NotFound("User not found")

        post = Post(title=title, content=content, user_id=identity.user_id)
        self.db.add(post)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise NotFound("User not found") from e
        self.db.refresh(post)
        logger.info(f"User {identity.user_id} created post {post.id}")
        return post

    def _get_owned_post(self, identity: Identity, post_id: int, action: str) -> Post:
        """Load a post and check that the identity is its author."""
        post = self.db.query(Post).filter(Post.id == post_id).first()
        if post is None:
            raise NotFound("Post not found")
        if post.user_id != identity.user_id:
            logger.warning(f"User {identity.user_id} denied {action} on post {post_id}")
            raise Forbidden(f"Unauthorized to {action} this post")
        return post

    def update_post(
        self,
        identity: Identity,
        post_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Post:
        """Apply the supplied fields. updated_at is refreshed even if none are given."""
        post = self._get_owned_post(identity, post_id, "update")

        if title is not None:
            post.title = title
        if content is not None:
            post.content = content
        post.touch()

        self.db.commit()
        self.db.refresh(post)
        logger.info(f"User {identity.user_id} updated post {post.id}")
        return post

    def delete_post(self, identity: Identity, post_id: int) -> None:
        post = self._get_owned_post(identity, post_id, "delete")
        self.db.delete(post)
        self.db.commit()
        logger.info(f"User {identity.user_id} deleted post {post_id}")
