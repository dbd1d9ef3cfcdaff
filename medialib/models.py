import datetime
import uuid

from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.types import TypeDecorator, CHAR
from .extensions import db
from .languages import get_language_name, DEFAULT_LANGUAGE


class GUID(TypeDecorator):
    """Platform-independent GUID type.

    Uses PostgreSQL's UUID type, otherwise uses CHAR(36), storing UUID as string.

    """

    impl = CHAR
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(PG_UUID())
        else:
            return dialect.type_descriptor(CHAR(36))

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        if dialect.name == 'postgresql':
            return value
        else:
            return str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(GUID(), primary_key=True, default=uuid.uuid4)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.datetime.utcnow)

    # Storage-backed images live under <folder>/<file_directory>/<name>
    file_directory = db.Column(db.String(100), nullable=True)
    avatar = db.Column(db.String(255), nullable=True)
    banner = db.Column(db.String(255), nullable=True)
    # External images (e.g. from an OAuth provider)
    avatar_url = db.Column(db.Text, nullable=True)
    banner_url = db.Column(db.Text, nullable=True)

    def to_dict(self):
        return {
            'id': str(self.id),
            'username': self.username,
            'email': self.email,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'file_directory': self.file_directory,
            'avatar': self.avatar,
            'banner': self.banner,
            'avatar_url': self.avatar_url,
            'banner_url': self.banner_url,
        }

    def __repr__(self):
        return f'<User {self.username}>'


class Movie(db.Model):
    __tablename__ = 'movies'
    id = db.Column(GUID(), primary_key=True, default=uuid.uuid4)
    imdb_id = db.Column(db.String(20), unique=True, nullable=True, index=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, index=True)
    content_type = db.Column(db.String(20), nullable=False, default='MOVIE')  # MOVIE, TV_SERIES, SHORT
    created_at = db.Column(db.DateTime, default=datetime.datetime.utcnow)

    episodes = db.relationship('MovieEpisode', backref='movie', lazy=True,
                               cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Movie {self.title}>'


class MovieEpisode(db.Model):
    __tablename__ = 'movie_episodes'
    id = db.Column(GUID(), primary_key=True, default=uuid.uuid4)
    movie_id = db.Column(GUID(), db.ForeignKey('movies.id', ondelete='CASCADE'), nullable=False, index=True)
    season_number = db.Column(db.Integer, nullable=False, default=1)
    episode_number = db.Column(db.Integer, nullable=False, default=1)
    title = db.Column(db.String(255), nullable=True)
    file_name = db.Column(db.String(255), nullable=True)

    subtitles = db.relationship('Subtitle', backref='episode', lazy=True,
                                cascade='all, delete-orphan')

    __table_args__ = (
        db.UniqueConstraint('movie_id', 'season_number', 'episode_number', name='uq_movie_season_episode'),
    )

    def __repr__(self):
        return f'<MovieEpisode movie={self.movie_id} S{self.season_number:02d}E{self.episode_number:02d}>'


class Subtitle(db.Model):
    __tablename__ = 'subtitles'
    id = db.Column(GUID(), primary_key=True, default=uuid.uuid4)
    episode_id = db.Column(GUID(), db.ForeignKey('movie_episodes.id', ondelete='CASCADE'), nullable=False, index=True)
    language = db.Column(db.String(10), nullable=True, index=True)  # None is the default language (English)
    file_name = db.Column(db.String(255), nullable=False)
    label = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.datetime.utcnow)

    def to_dict(self):
        return {
            'id': str(self.id),
            'episode_id': str(self.episode_id),
            'language': self.language,
            'language_name': self.label or get_language_name(self.language or DEFAULT_LANGUAGE),
            'file_name': self.file_name,
        }

    def __repr__(self):
        return f'<Subtitle id={self.id} lang={self.language} file={self.file_name}>'
