import sys

import click
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from .extensions import db
from .lib.maintenance import get_movie_stats, delete_all_movies, check_database_connection


def _echo_stats(title, stats):
    click.echo(f"\n{title}")
    click.echo(f"   Movies: {stats.total_movies}")
    click.echo(f"   Episodes: {stats.total_episodes}")
    click.echo(f"   Subtitles: {stats.total_subtitles}")


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Clear existing data and create database tables."""
    click.echo("Dropping all tables...")
    db.drop_all()
    click.echo("Creating all tables...")
    db.create_all()
    click.echo("Initialized the database!")


@click.command("delete-movies")
@click.option("--confirm", is_flag=True, help="Actually delete. Without it only the current counts are shown.")
@with_appcontext
def delete_movies_command(confirm):
    """Delete ALL movies, cascading to their episodes and subtitles."""
    try:
        if not confirm:
            click.echo("This command will delete ALL movies from the database!")
            click.echo("\nWARNING: This action cannot be undone!")
            click.echo("   This will delete:")
            click.echo("   - All movies")
            click.echo("   - All episodes (cascade)")
            click.echo("   - All subtitles (cascade)")
            _echo_stats("Current database statistics:", get_movie_stats())
            click.echo("\nTo proceed, run with --confirm flag:")
            click.echo("   flask --app run delete-movies --confirm")
            sys.exit(1)

        before = get_movie_stats()
        _echo_stats("Current database statistics:", before)

        if before.total_movies == 0:
            click.echo("\nDatabase is already empty. Nothing to delete.")
            return

        click.echo("\nProceeding with deletion...")
        deleted = delete_all_movies()
        click.echo(f"Deleted {deleted} movie(s)")
        click.echo("   (Episodes and subtitles were deleted with them)")

        _echo_stats("Final database statistics:", get_movie_stats())
        click.echo("\nAll movie data has been deleted successfully!")
    except SQLAlchemyError as e:
        click.echo(f"\nError deleting movies: {e}", err=True)
        sys.exit(1)
    finally:
        db.session.remove()


@click.command("check-db")
@with_appcontext
def check_db_command():
    """Test the database connection."""
    click.echo("Testing database connection...")
    try:
        user_count = check_database_connection()
    except SQLAlchemyError as e:
        click.echo(f"Database connection failed: {e}", err=True)
        sys.exit(1)
    finally:
        db.session.remove()

    click.echo("Database connected successfully!")
    click.echo(f"Current users in database: {user_count}")
    click.echo("Database session closed")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(delete_movies_command)
    app.cli.add_command(check_db_command)
