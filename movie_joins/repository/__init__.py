"""Repository layer: one read-only query per exercise (SQLite).

Keep functions thin and focused; every SQL string lives here.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Any

from . import casting_repo, movie_repo

EXERCISES: Dict[str, Callable[[], List[Dict[str, Any]]]] = {
    "films_from_sixty_two": movie_repo.films_from_sixty_two,
    "year_of_kane": movie_repo.year_of_kane,
    "trek_films": movie_repo.trek_films,
    "films_by_id": movie_repo.films_by_id,
    "example_join": casting_repo.example_join,
    "casablanca_cast": casting_repo.casablanca_cast,
    "alien_cast": casting_repo.alien_cast,
    "ford_films": casting_repo.ford_films,
    "ford_supporting_films": casting_repo.ford_supporting_films,
    "films_and_stars_from_sixty_two": casting_repo.films_and_stars_from_sixty_two,
    "travoltas_busiest_years": casting_repo.travoltas_busiest_years,
    "andrews_films_and_leads": casting_repo.andrews_films_and_leads,
    "prolific_actors": casting_repo.prolific_actors,
    "films_by_cast_size": casting_repo.films_by_cast_size,
    "colleagues_of_garfunkel": casting_repo.colleagues_of_garfunkel,
}
