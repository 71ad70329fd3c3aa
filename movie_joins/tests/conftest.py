import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


ACTORS = [
    (31, "Sean Connery"),
    (2, "Ursula Andress"),
    (3, "Harrison Ford"),
    (4, "Mark Hamill"),
    (5, "Carrie Fisher"),
    (6, "John Travolta"),
    (7, "Olivia Newton-John"),
    (8, "Julie Andrews"),
    (9, "Christopher Plummer"),
    (10, "Art Garfunkel"),
    (11, "Jack Nicholson"),
    (12, "Ann-Margret"),
    (13, "Humphrey Bogart"),
    (14, "Ingrid Bergman"),
    (15, "Sigourney Weaver"),
    (16, "Tom Skerritt"),
    (17, "Peter O'Toole"),
    (21, "Paul Newman"),
    (22, "Alan Arkin"),
    (23, "Jon Voight"),
    (24, "Orson Welles"),
    (25, "William Shatner"),
    (26, "Richard Gere"),
    (27, "Brooke Adams"),
    (28, "Sam Shepard"),
    (29, "Jamie Lee Curtis"),
    (30, "Donald Pleasence"),
    (40, "Zelda Prolific"),
    (41, "Aaron Prolific"),
    (42, "Nearly Prolific"),
]

# (id, title, yr, score, votes, director_id)
MOVIES = [
    (1, "Dr. No", 1962, 7.3, 150000, 101),
    (2, "Lawrence of Arabia", 1962, 8.3, 280000, 102),
    (3, "Star Wars", 1977, 8.6, 1300000, 103),
    (4, "Raiders of the Lost Ark", 1981, 8.4, 950000, 104),
    (5, "The Empire Strikes Back", 1980, 8.7, 1250000, 105),
    (6, "Grease", 1978, 7.2, 250000, 106),
    (7, "Saturday Night Fever", 1977, 6.8, 90000, 107),
    (8, "Moment by Moment", 1978, 4.1, 2000, 108),
    (9, "Urban Cowboy", 1980, 6.4, 30000, 109),
    (10, "Mary Poppins", 1964, 7.8, 180000, 110),
    (11, "The Sound of Music", 1965, 8.1, 240000, 111),
    (12, "Torn Curtain", 1966, 6.7, 35000, 112),
    (13, "Carnal Knowledge", 1971, 6.8, 20000, 113),
    (14, "Catch-22", 1970, 7.1, 25000, 113),
    (1119, "Casablanca", 1942, 8.5, 590000, 114),
    (1595, "Citizen Kane", 1941, 8.3, 450000, 115),
    (1768, "Alien", 1979, 8.5, 900000, 116),
    (19, "Star Trek II: The Wrath of Khan", 1982, 7.7, 130000, 117),
    (18, "Star Trek: The Motion Picture", 1979, 6.4, 95000, 118),
    (20, "Days of Heaven", 1978, 7.8, 60000, 119),
    (21, "Halloween", 1978, 7.7, 300000, 120),
]

# (movie_id, actor_id, ord)
CASTINGS = [
    (1, 31, 1), (1, 2, 2),
    (2, 17, 1),
    (3, 4, 1), (3, 3, 2), (3, 5, 3),
    (4, 3, 1),
    (5, 4, 1), (5, 3, 2), (5, 5, 3),
    (6, 6, 1), (6, 7, 2),
    (7, 6, 1),
    (8, 6, 1),
    (9, 6, 1),
    (10, 8, 1),
    (11, 8, 1), (11, 9, 2),
    (12, 21, 1), (12, 8, 2),
    (13, 11, 1), (13, 10, 2), (13, 12, 3),
    (14, 22, 1), (14, 10, 2), (14, 23, 3),
    (1119, 13, 1), (1119, 14, 2),
    (1595, 24, 1),
    (1768, 16, 1), (1768, 15, 2),
    (18, 25, 1),
    (19, 25, 1),
    (20, 26, 1), (20, 27, 2), (20, 28, 3),
    (21, 29, 1), (21, 30, 2),
]

# actor_id -> number of filler films where they star
PROLIFIC_STARS = {40: 15, 41: 16, 42: 14}


def _seed(conn: sqlite3.Connection):
    conn.executemany("INSERT INTO actors(id, name) VALUES(?,?)", ACTORS)
    conn.executemany(
        "INSERT INTO movies(id, title, yr, score, votes, director_id) VALUES(?,?,?,?,?,?)", MOVIES
    )
    conn.executemany("INSERT INTO castings(movie_id, actor_id, ord) VALUES(?,?,?)", CASTINGS)
    movie_id = 5000
    for actor_id, n in PROLIFIC_STARS.items():
        for i in range(n):
            movie_id += 1
            conn.execute(
                "INSERT INTO movies(id, title, yr, score, votes, director_id) VALUES(?,?,?,?,?,?)",
                (movie_id, f"Filler {actor_id}-{i}", 1990, 5.0, 100, 200),
            )
            conn.execute(
                "INSERT INTO castings(movie_id, actor_id, ord) VALUES(?,?,?)", (movie_id, actor_id, 1)
            )


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "movies_test.db"
    # Point movie_joins to this temp DB
    os.environ["MOVIE_DB_PATH"] = str(path)
    # Initialize schema and fixture cast
    schema = Path(_PROJECT_ROOT / "schema.sql").read_text(encoding="utf-8")
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(schema)
        _seed(conn)
        conn.commit()
    finally:
        conn.close()
    return str(path)


@pytest.fixture(autouse=True)
def _use_tmp_db(tmp_db_path):
    # Safety: queries must only ever hit the temp DB
    assert os.environ.get("MOVIE_DB_PATH") == tmp_db_path, "Refusing to run against non-temp DB"
    from movie_joins.logs import clear_entries
    clear_entries()
    yield
