"""
Fixture dataset used by the test suite and by ``scripts/seed.py``.

Comments reference articles by their 1-based position in ``ARTICLES``;
``seeding.seed`` inserts articles in list order so positions and
generated ids line up on a fresh schema.
"""
from datetime import datetime, timezone


def _ts(year, month, day, hour=0, minute=0, second=0):
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


PEXELS_NEWS_IMG = (
    "https://images.pexels.com/photos/158651/"
    "news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"
)

TOPICS = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

USERS = [
    {
        "username": "butter_bridge",
        "name": "jonny",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "icellusedkars",
        "name": "sam",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "rogersop",
        "name": "paul",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "lurker",
        "name": "do_nothing",
        "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    },
]

ARTICLES = [
    {
        "title": "Living in the shadow of a great man",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "I find this existence challenging",
        "created_at": _ts(2020, 7, 9, 20, 11),
        "votes": 100,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "Sony Vaio; or, The Laptop",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Call me Mitchell. Some years ago I decided to buy a laptop.",
        "created_at": _ts(2020, 10, 16, 5, 3),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "Eight pug gifs that remind me of mitch",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "some gifs",
        "created_at": _ts(2020, 11, 3, 9, 12),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "Student SUES Mitch!",
        "topic": "mitch",
        "author": "rogersop",
        "body": "We all love Mitch and his wonderful, unique typing style.",
        "created_at": _ts(2020, 5, 6, 1, 14),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "UNCOVERED: catspiracy to bring down democracy",
        "topic": "cats",
        "author": "rogersop",
        "body": "Bastet walks amongst us, and the cats are taking arms!",
        "created_at": _ts(2020, 8, 3, 14, 14),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "A",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Delicious tin of cat food",
        "created_at": _ts(2020, 10, 18, 2, 0),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "Z",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "I was hungry.",
        "created_at": _ts(2020, 1, 7, 14, 8),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "Does Mitch predate civilisation?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Archaeologists have uncovered a gigantic statue from the dawn of humanity.",
        "created_at": _ts(2020, 4, 17, 2, 8),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "They're not exactly dogs, are they?",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Well? Think about it.",
        "created_at": _ts(2020, 6, 6, 9, 10),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "Seven inspirational thought leaders from Manchester UK",
        "topic": "mitch",
        "author": "rogersop",
        "body": "Who are we kidding, there is only one, and it's Mitch!",
        "created_at": _ts(2020, 5, 14, 4, 15),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "Am I a cat?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Having run out of ideas for articles, I am staring at the wall.",
        "created_at": _ts(2020, 1, 15, 22, 21),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        "title": "Moustache",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Have you seen the size of that thing?",
        "created_at": _ts(2020, 10, 11, 11, 24),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
    {
        # Same timestamp as "Moustache": exercises the insertion-order tie-break.
        "title": "Another article about Mitch",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "There will never be enough articles about Mitch!",
        "created_at": _ts(2020, 10, 11, 11, 24),
        "votes": 0,
        "article_img_url": PEXELS_NEWS_IMG,
    },
]

COMMENTS = [
    {"article_id": 9, "author": "butter_bridge", "votes": 16,
     "body": "Oh, I've got compassion running out of my nose, pal! I'm the Sultan of Sentiment!",
     "created_at": _ts(2020, 4, 6, 12, 17)},
    {"article_id": 1, "author": "butter_bridge", "votes": 14,
     "body": "The beautiful thing about treasure is that it exists. Got to find out what kind of sheets these are.",
     "created_at": _ts(2020, 10, 31, 3, 3)},
    {"article_id": 1, "author": "icellusedkars", "votes": 100,
     "body": "Replacing the quiet elegance of the dark suit and tie with the casual indifference of these muted earth tones.",
     "created_at": _ts(2020, 3, 1, 1, 13)},
    {"article_id": 1, "author": "icellusedkars", "votes": -100,
     "body": " I carry a log - yes. Is it funny to you? It is not to me.",
     "created_at": _ts(2020, 2, 23, 12, 1)},
    {"article_id": 1, "author": "icellusedkars", "votes": 0,
     "body": "I hate streaming noses",
     "created_at": _ts(2020, 11, 3, 21, 0)},
    {"article_id": 1, "author": "icellusedkars", "votes": 0,
     "body": "I hate streaming eyes even more",
     "created_at": _ts(2020, 4, 11, 21, 2)},
    {"article_id": 1, "author": "icellusedkars", "votes": 0,
     "body": "Lobster pot",
     "created_at": _ts(2020, 5, 15, 20, 19)},
    {"article_id": 1, "author": "icellusedkars", "votes": 0,
     "body": "Delicious crackerbreads",
     "created_at": _ts(2020, 4, 14, 20, 19)},
    {"article_id": 1, "author": "icellusedkars", "votes": 0,
     "body": "Superficially charming",
     "created_at": _ts(2020, 1, 1, 3, 8)},
    {"article_id": 3, "author": "icellusedkars", "votes": 0,
     "body": "git push origin master",
     "created_at": _ts(2020, 6, 20, 7, 24)},
    {"article_id": 3, "author": "icellusedkars", "votes": 0,
     "body": "Ambidextrous marsupial",
     "created_at": _ts(2020, 9, 19, 23, 10)},
    {"article_id": 1, "author": "icellusedkars", "votes": 0,
     "body": "Massive intercranial brain haemorrhage",
     "created_at": _ts(2020, 3, 2, 7, 10)},
    {"article_id": 1, "author": "icellusedkars", "votes": 0,
     "body": "Fruit pastilles",
     "created_at": _ts(2020, 6, 15, 10, 25)},
    {"article_id": 5, "author": "icellusedkars", "votes": 16,
     "body": "What do you see? I have no idea where this will lead us. This place I speak of, is known as the Black Lodge.",
     "created_at": _ts(2020, 6, 9, 5, 0)},
    {"article_id": 5, "author": "butter_bridge", "votes": 1,
     "body": "I am 100% sure that we're not completely sure.",
     "created_at": _ts(2020, 11, 24, 0, 8)},
    {"article_id": 1, "author": "butter_bridge", "votes": 20,
     "body": "This is a bad article name",
     "created_at": _ts(2020, 6, 9, 5, 0)},
    {"article_id": 6, "author": "butter_bridge", "votes": 1,
     "body": "This morning, I showered for nine minutes.",
     "created_at": _ts(2020, 7, 21, 0, 20)},
    {"article_id": 9, "author": "butter_bridge", "votes": 0,
     "body": "The owls are not what they seem.",
     "created_at": _ts(2020, 3, 14, 17, 2)},
]

TEST_DATA = {
    "topics": TOPICS,
    "users": USERS,
    "articles": ARTICLES,
    "comments": COMMENTS,
}
