from backend.app.services import list_helper

BLOGS = [
    {'title': 'React patterns', 'author': 'Michael Chan', 'url': 'https://reactpatterns.com/', 'likes': 7},
    {'title': 'Go To Statement Considered Harmful', 'author': 'Edsger W. Dijkstra',
     'url': 'http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html', 'likes': 5},
    {'title': 'Canonical string reduction', 'author': 'Edsger W. Dijkstra',
     'url': 'http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html', 'likes': 12},
    {'title': 'First class tests', 'author': 'Robert C. Martin',
     'url': 'http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll', 'likes': 10},
    {'title': 'TDD harms architecture', 'author': 'Robert C. Martin',
     'url': 'http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html', 'likes': 0},
    {'title': 'Type wars', 'author': 'Robert C. Martin',
     'url': 'http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html', 'likes': 2},
]


def test_dummy_returns_one():
    assert list_helper.dummy([]) == 1
    assert list_helper.dummy(BLOGS) == 1


def test_total_likes_of_empty_list_is_zero():
    assert list_helper.total_likes([]) == 0


def test_total_likes_of_single_blog():
    assert list_helper.total_likes(BLOGS[:1]) == 7


def test_total_likes_of_many_blogs():
    assert list_helper.total_likes(BLOGS) == 36
    assert list_helper.total_likes(BLOGS[:2]) + list_helper.total_likes(BLOGS[2:]) == 36


def test_favorite_blog_of_empty_list_is_none():
    assert list_helper.favorite_blog([]) is None


def test_favorite_blog_of_single_blog_is_itself():
    assert list_helper.favorite_blog(BLOGS[:1]) == {
        'title': 'React patterns', 'author': 'Michael Chan', 'likes': 7,
    }


def test_favorite_blog_of_many_blogs():
    assert list_helper.favorite_blog(BLOGS) == {
        'title': 'Canonical string reduction', 'author': 'Edsger W. Dijkstra', 'likes': 12,
    }


def test_favorite_blog_tie_keeps_first():
    blogs = [
        {'title': 'a', 'author': 'x', 'likes': 3},
        {'title': 'b', 'author': 'y', 'likes': 9},
        {'title': 'c', 'author': 'z', 'likes': 9},
    ]
    assert list_helper.favorite_blog(blogs)['title'] == 'b'


def test_favorite_blog_with_all_zero_likes():
    blogs = [{'title': 'a', 'author': 'x', 'likes': 0}, {'title': 'b', 'author': 'y', 'likes': 0}]
    assert list_helper.favorite_blog(blogs) == {'title': 'a', 'author': 'x', 'likes': 0}


def test_most_blogs_of_empty_list_is_none():
    assert list_helper.most_blogs([]) is None


def test_most_blogs_of_single_blog():
    assert list_helper.most_blogs(BLOGS[:1]) == {'author': 'Michael Chan', 'blogs': 1}


def test_most_blogs_of_many_blogs():
    assert list_helper.most_blogs(BLOGS) == {'author': 'Robert C. Martin', 'blogs': 3}


def test_most_blogs_single_author():
    blogs = [{'title': str(i), 'author': 'solo', 'likes': i} for i in range(4)]
    assert list_helper.most_blogs(blogs) == {'author': 'solo', 'blogs': 4}


def test_most_blogs_tie_keeps_first_seen_author():
    blogs = [
        {'title': 'a', 'author': 'late', 'likes': 1},
        {'title': 'b', 'author': 'early', 'likes': 1},
        {'title': 'c', 'author': 'early', 'likes': 1},
        {'title': 'd', 'author': 'late', 'likes': 1},
    ]
    assert list_helper.most_blogs(blogs) == {'author': 'late', 'blogs': 2}


def test_most_blogs_author_is_case_sensitive():
    blogs = [
        {'title': 'a', 'author': 'ann', 'likes': 1},
        {'title': 'b', 'author': 'Ann', 'likes': 1},
        {'title': 'c', 'author': 'Ann', 'likes': 1},
    ]
    assert list_helper.most_blogs(blogs) == {'author': 'Ann', 'blogs': 2}


def test_most_likes_of_empty_list_is_none():
    assert list_helper.most_likes([]) is None


def test_most_likes_of_single_blog():
    assert list_helper.most_likes(BLOGS[:1]) == {'author': 'Michael Chan', 'likes': 7}


def test_most_likes_of_many_blogs():
    assert list_helper.most_likes(BLOGS) == {'author': 'Edsger W. Dijkstra', 'likes': 17}


def test_most_likes_tie_keeps_first_seen_author():
    blogs = [
        {'title': 'a', 'author': 'first', 'likes': 4},
        {'title': 'b', 'author': 'second', 'likes': 10},
        {'title': 'c', 'author': 'first', 'likes': 6},
    ]
    assert list_helper.most_likes(blogs) == {'author': 'first', 'likes': 10}


def test_helpers_do_not_mutate_input():
    snapshot = [dict(b) for b in BLOGS]
    list_helper.favorite_blog(BLOGS)
    list_helper.most_blogs(BLOGS)
    list_helper.most_likes(BLOGS)
    assert BLOGS == snapshot
