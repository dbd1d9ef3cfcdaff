import pytest

from config import TestingConfig
from medialib import create_app
from medialib.extensions import db as _db
from medialib.models import Movie, MovieEpisode, Subtitle, User


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def movie_with_subtitles(db):
    """One series with two episodes, each with an English and a Thai subtitle."""
    movie = Movie(title='Test Show', slug='test-show', content_type='TV_SERIES')
    for number in (1, 2):
        episode = MovieEpisode(season_number=1, episode_number=number,
                               title=f'Episode {number}', file_name=f'Show.S01E0{number}.mkv')
        episode.subtitles.append(Subtitle(language=None, file_name=f'Show.S01E0{number}.srt'))
        episode.subtitles.append(Subtitle(language='tha', file_name=f'Show.S01E0{number}.tha.srt'))
        movie.episodes.append(episode)
    db.session.add(movie)
    db.session.commit()
    return movie


@pytest.fixture
def user(db):
    user = User(username='alice', email='alice@example.com',
                file_directory='2025/10/02', avatar='avatar.jpg',
                banner_url='https://images.example.com/banner.png')
    db.session.add(user)
    db.session.commit()
    return user
