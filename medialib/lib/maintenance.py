"""Database maintenance tasks used by the admin CLI commands."""
import logging
from collections import namedtuple

from sqlalchemy import delete, text

from ..extensions import db
from ..models import Movie, MovieEpisode, Subtitle, User

logger = logging.getLogger(__name__)

MovieStats = namedtuple('MovieStats', ['total_movies', 'total_episodes', 'total_subtitles'])


def get_movie_stats():
    """Count movies, episodes and subtitles."""
    return MovieStats(
        total_movies=db.session.query(Movie).count(),
        total_episodes=db.session.query(MovieEpisode).count(),
        total_subtitles=db.session.query(Subtitle).count(),
    )


def delete_all_movies():
    """
    Delete every movie along with its episodes and subtitles.

    Children are deleted explicitly before their parents so the cascade also
    holds on databases without enforced foreign keys (SQLite). Returns the
    number of movies deleted.
    """
    try:
        movie_count = db.session.query(Movie).count()
        db.session.execute(delete(Subtitle))
        db.session.execute(delete(MovieEpisode))
        db.session.execute(delete(Movie))
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"Deleted {movie_count} movie(s) with their episodes and subtitles")
    return movie_count


def check_database_connection():
    """Run a trivial query and count users. Raises on connection failure."""
    db.session.execute(text('SELECT 1'))
    user_count = db.session.query(User).count()
    logger.info(f"Database connection OK, {user_count} user(s)")
    return user_count
