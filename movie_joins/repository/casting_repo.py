"""
Join exercises across movies, castings and actors.

castings.ord gives the billing position of an actor in a film; ord = 1 is
the starring role. Name lookups written with LIKE follow the store's
collation (ASCII case-insensitive under SQLite).
"""
from __future__ import annotations

from ..db import ResultRows, execute

Rows = ResultRows

MIN_STARRING_ROLES = 15


def example_join() -> Rows:
    return execute(
        """
        SELECT
          *
        FROM
          movies
        JOIN
          castings ON movies.id = castings.movie_id
        JOIN
          actors ON castings.actor_id = actors.id
        WHERE
          actors.name = ?
        """,
        ("Sean Connery",),
        action="example_join",
    )


def _cast_of(title: str, action: str) -> Rows:
    return execute(
        """
        SELECT
          a.name
        FROM
          actors a
        JOIN
          castings c ON c.actor_id = a.id
        JOIN
          movies m ON m.id = c.movie_id
        WHERE
          m.title = ?
        ORDER BY
          c.ord
        """,
        (title,),
        action=action,
    )


def casablanca_cast() -> Rows:
    return _cast_of("Casablanca", "casablanca_cast")


def alien_cast() -> Rows:
    return _cast_of("Alien", "alien_cast")


def ford_films() -> Rows:
    # List the films in which 'Harrison Ford' has appeared.
    return execute(
        """
        SELECT
          m.title
        FROM
          movies m
        JOIN
          castings c ON c.movie_id = m.id
        WHERE
          c.actor_id IN (
            SELECT
              id
            FROM
              actors
            WHERE
              name LIKE ?
          )
        """,
        ("Harrison Ford",),
        action="ford_films",
    )


def ford_supporting_films() -> Rows:
    # Films where 'Harrison Ford' appeared, but not in the starring role.
    return execute(
        """
        SELECT
          m.title
        FROM
          movies m
        JOIN
          castings c ON c.movie_id = m.id
        WHERE
          c.actor_id IN (
            SELECT
              id
            FROM
              actors
            WHERE
              name LIKE ?
          ) AND
          c.ord > 1
        """,
        ("Harrison Ford",),
        action="ford_supporting_films",
    )


def films_and_stars_from_sixty_two() -> Rows:
    # Title and leading star of every 1962 film.
    return execute(
        """
        SELECT
          m.title,
          a.name
        FROM
          movies m
        INNER JOIN
          castings c ON c.movie_id = m.id
        INNER JOIN
          actors a ON a.id = c.actor_id
        WHERE
          m.yr = ? AND
          c.ord = 1
        """,
        (1962,),
        action="films_and_stars_from_sixty_two",
    )


def travoltas_busiest_years() -> Rows:
    """
    Busiest years for 'John Travolta': the year and the number of movies he
    made, for any year with at least 2 movies.
    """
    return execute(
        """
        SELECT
          m.yr,
          COUNT(m.title) AS movie_count
        FROM
          movies m
        INNER JOIN
          castings c ON c.movie_id = m.id
        INNER JOIN
          actors a ON a.id = c.actor_id
        WHERE
          a.name LIKE ?
        GROUP BY
          m.yr
        HAVING
          COUNT(m.title) > 1
        """,
        ("John Travolta",),
        action="travoltas_busiest_years",
    )


def andrews_films_and_leads() -> Rows:
    """
    Film title and leading actor for every film 'Julie Andrews' played in.
    andrews_movies is computed once and joined back against castings.
    """
    return execute(
        """
        WITH andrews_movies AS (
          SELECT
            m.title,
            c.movie_id
          FROM
            movies m
          INNER JOIN
            castings c ON c.movie_id = m.id
          INNER JOIN
            actors a ON a.id = c.actor_id
          WHERE
            a.name LIKE ?
        )
        SELECT DISTINCT
          andrews_movies.title,
          a2.name
        FROM
          andrews_movies
        LEFT JOIN
          castings c2 ON andrews_movies.movie_id = c2.movie_id
        LEFT JOIN
          actors a2 ON a2.id = c2.actor_id
        WHERE
          c2.ord = 1
        """,
        ("Julie Andrews",),
        action="andrews_films_and_leads",
    )


def prolific_actors() -> Rows:
    # Alphabetical list of actors with at least 15 starring roles.
    return execute(
        """
        SELECT
          a.name
        FROM
          actors a
        LEFT JOIN
          castings c ON c.actor_id = a.id
        WHERE
          c.ord = 1
        GROUP BY
          a.name
        HAVING
          COUNT(c.movie_id) >= ?
        ORDER BY
          a.name
        """,
        (MIN_STARRING_ROLES,),
        action="prolific_actors",
    )


def films_by_cast_size() -> Rows:
    # 1978 films by cast size (desc), then title (asc).
    return execute(
        """
        SELECT
          m.title,
          COUNT(c.actor_id) AS actor_count
        FROM
          movies m
        JOIN
          castings c ON c.movie_id = m.id
        WHERE
          m.yr = ?
        GROUP BY
          m.title
        ORDER BY
          COUNT(c.actor_id) DESC,
          m.title
        """,
        (1978,),
        action="films_by_cast_size",
    )


def colleagues_of_garfunkel() -> Rows:
    # Everyone who has played alongside 'Art Garfunkel'.
    name = "Art Garfunkel"
    return execute(
        """
        SELECT
          a.name
        FROM
          actors a
        JOIN
          castings c ON c.actor_id = a.id
        WHERE
          c.movie_id IN (
            SELECT
              c2.movie_id
            FROM
              castings c2
            JOIN
              actors a2 ON c2.actor_id = a2.id
            WHERE
              a2.name = ?
          ) AND
          a.name != ?
        """,
        (name, name),
        action="colleagues_of_garfunkel",
    )
