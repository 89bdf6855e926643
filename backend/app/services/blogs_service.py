"""Service layer for blog posts.

Provides business logic: validation, ownership checks, user population
and CRUD operations on top of the blogs repository.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId

from backend.app.repositories import blogs_repo, users_repo, to_object_id
from backend.app.services import list_helper

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('title', 'author', 'url', 'likes')


class BlogServiceError(Exception):
    def __init__(self, code: str, message: str, status: int = 400):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status


def format_blog(blog: Dict[str, Any], user: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Serialize a blog document; embeds ``user`` when the owner was populated."""
    if user is not None:
        owner: Any = {
            'id': str(user['_id']),
            'username': user.get('username'),
            'name': user.get('name'),
        }
    else:
        owner = str(blog['user']) if blog.get('user') is not None else None
    return {
        'id': str(blog['_id']),
        'title': blog.get('title'),
        'author': blog.get('author'),
        'url': blog.get('url'),
        'likes': blog.get('likes', 0),
        'user': owner,
    }


def _parse_id(blog_id: Any) -> ObjectId:
    oid = to_object_id(blog_id)
    if oid is None:
        raise BlogServiceError('malformatted_id', 'malformatted id', 400)
    return oid


def _validate_likes(likes: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(likes, bool) or not isinstance(likes, int) or likes < 0:
        raise BlogServiceError('validation_failed', 'likes must be a non-negative integer')
    return likes


def list_blogs() -> List[Dict[str, Any]]:
    blogs = blogs_repo.find_all()
    owner_ids = list({b['user'] for b in blogs if b.get('user') is not None})
    owners = {u['_id']: u for u in users_repo.find_by_ids(owner_ids)}
    return [format_blog(b, owners.get(b.get('user'))) for b in blogs]


def get_blog(blog_id: Any) -> Dict[str, Any]:
    blog = blogs_repo.find_by_id(_parse_id(blog_id))
    if not blog:
        raise BlogServiceError('not_found', 'blog not found', 404)
    owner = users_repo.find_by_id(blog['user']) if blog.get('user') is not None else None
    return format_blog(blog, owner)


def create_blog(user: Dict[str, Any], payload: Dict[str, Any]) -> Dict[str, Any]:
    """Create a blog owned by ``user`` (the authenticated user document)."""
    title = payload.get('title')
    url = payload.get('url')
    if not title or not url:
        raise BlogServiceError('validation_failed', 'title or url missing')

    likes = payload.get('likes')
    likes = 0 if likes is None else _validate_likes(likes)

    blog = {
        'title': title,
        'author': payload.get('author'),
        'url': url,
        'likes': likes,
        'user': user['_id'],
    }
    blog['_id'] = blogs_repo.insert_one(blog)
    users_repo.add_blog(user['_id'], blog['_id'])
    logger.info("Blog %s created by user %s", blog['_id'], user['_id'])
    return format_blog(blog)


def delete_blog(user_id: Any, blog_id: Any) -> None:
    oid = _parse_id(blog_id)
    blog = blogs_repo.find_by_id(oid)
    if not blog:
        raise BlogServiceError('not_found', 'blog not found', 404)
    if str(blog.get('user')) != str(user_id):
        raise BlogServiceError('forbidden', "can't delete blog created by another user", 401)

    blogs_repo.delete_by_id(oid)
    users_repo.remove_blog(blog['user'], oid)
    logger.info("Blog %s deleted by user %s", oid, user_id)


def update_blog(blog_id: Any, payload: Dict[str, Any]) -> Dict[str, Any]:
    oid = _parse_id(blog_id)
    fields = {k: payload[k] for k in EDITABLE_FIELDS if payload.get(k) is not None}
    if 'likes' in fields:
        _validate_likes(fields['likes'])

    if fields:
        updated = blogs_repo.update_by_id(oid, fields)
    else:
        updated = blogs_repo.find_by_id(oid)
    if not updated:
        raise BlogServiceError('not_found', 'blog not found', 404)
    return format_blog(updated)


def blog_statistics() -> Dict[str, Any]:
    """Run every list_helper aggregate over all stored blogs."""
    records: List[list_helper.BlogPost] = [
        {
            'title': b.get('title'),
            'author': b.get('author'),
            'likes': b.get('likes') or 0,
        }
        for b in blogs_repo.find_all()
    ]
    return {
        'total_likes': list_helper.total_likes(records),
        'favorite_blog': list_helper.favorite_blog(records),
        'most_blogs': list_helper.most_blogs(records),
        'most_likes': list_helper.most_likes(records),
    }
