"""Summary statistics over a list of blog records.

All functions are pure: they read the given sequence once, left to right,
and never mutate it. "No data" is returned as ``None`` rather than raised.
Ties are resolved in favour of the first record (or first-seen author),
since the maximum is taken with a strict ``>`` while folding.
"""
from __future__ import annotations

from typing import Dict, Optional, Sequence, TypedDict


class BlogPost(TypedDict):
    title: str
    author: str
    likes: int


class FavoriteBlog(TypedDict):
    title: str
    author: str
    likes: int


class AuthorBlogs(TypedDict):
    author: str
    blogs: int


class AuthorLikes(TypedDict):
    author: str
    likes: int


def dummy(blogs: Sequence[BlogPost]) -> int:
    return 1


def total_likes(blogs: Sequence[BlogPost]) -> int:
    return sum(blog['likes'] for blog in blogs)


def favorite_blog(blogs: Sequence[BlogPost]) -> Optional[FavoriteBlog]:
    """Return the most liked blog as ``{title, author, likes}``."""
    best: Optional[BlogPost] = None
    for blog in blogs:
        if best is None or blog['likes'] > best['likes']:
            best = blog
    if best is None:
        return None
    return {
        'title': best['title'],
        'author': best['author'],
        'likes': best['likes'],
    }


def _top_author(tallies: Dict[str, int]) -> Optional[tuple[str, int]]:
    # dicts keep insertion order, so iteration follows first appearance
    top: Optional[tuple[str, int]] = None
    for author, count in tallies.items():
        if top is None or count > top[1]:
            top = (author, count)
    return top


def most_blogs(blogs: Sequence[BlogPost]) -> Optional[AuthorBlogs]:
    """Return the author with the most blogs as ``{author, blogs}``."""
    tallies: Dict[str, int] = {}
    for blog in blogs:
        tallies[blog['author']] = tallies.get(blog['author'], 0) + 1
    top = _top_author(tallies)
    if top is None:
        return None
    return {'author': top[0], 'blogs': top[1]}


def most_likes(blogs: Sequence[BlogPost]) -> Optional[AuthorLikes]:
    """Return the author whose blogs have the most likes in total as ``{author, likes}``."""
    tallies: Dict[str, int] = {}
    for blog in blogs:
        tallies[blog['author']] = tallies.get(blog['author'], 0) + blog['likes']
    top = _top_author(tallies)
    if top is None:
        return None
    return {'author': top[0], 'likes': top[1]}
