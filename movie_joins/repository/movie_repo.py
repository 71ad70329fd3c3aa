"""Single-table warm-ups over `movies`."""
from __future__ import annotations

from ..db import ResultRows, execute

Rows = ResultRows


def films_from_sixty_two() -> Rows:
    # List the films where the yr is 1962 [Show id, title]
    return execute(
        """
        SELECT
          id,
          title
        FROM
          movies
        WHERE
          yr = ?
        """,
        (1962,),
        action="films_from_sixty_two",
    )


def year_of_kane() -> Rows:
    return execute(
        "SELECT yr FROM movies WHERE title = ?",
        ("Citizen Kane",),
        action="year_of_kane",
    )


def trek_films() -> Rows:
    # List all of the Star Trek movies, include the id, title and yr. Order by year.
    return execute(
        """
        SELECT
          id,
          title,
          yr
        FROM
          movies
        WHERE
          title LIKE ?
        ORDER BY
          yr
        """,
        ("Star Trek%",),
        action="trek_films",
    )


def films_by_id() -> Rows:
    ids = (1119, 1595, 1768)
    q = "SELECT title FROM movies WHERE id IN ({})".format(",".join(["?"] * len(ids)))
    return execute(q, ids, action="films_by_id")
