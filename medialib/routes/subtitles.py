import uuid

from flask import Blueprint, request, current_app
from ..extensions import db
from ..models import MovieEpisode, Subtitle
from ..languages import (build_subtitle_file_name, get_language_name, normalize_language_code,
                         parse_language_from_filename, DEFAULT_LANGUAGE)
from ..lib.responses import success, not_found, validation_error

subtitles_bp = Blueprint('subtitles', __name__, url_prefix='/api')


@subtitles_bp.route('/subtitles/filename')
def subtitle_filename():
    """Subtitle filename for a video file and language, e.g. Movie.tha.srt."""
    video = request.args.get('video', '').strip()
    lang = request.args.get('lang', '').strip()

    if not video:
        return validation_error([{'field': 'video', 'message': 'Video file name is required'}])

    language = normalize_language_code(lang) if lang else None
    return success('Subtitle file name built successfully', {
        'file_name': build_subtitle_file_name(video, language),
        'language': language,
    })


@subtitles_bp.route('/subtitles/parse')
def subtitle_parse():
    """Language code and name from a subtitle filename."""
    filename = request.args.get('filename', '').strip()
    if not filename:
        return validation_error([{'field': 'filename', 'message': 'File name is required'}])

    language = parse_language_from_filename(filename)
    return success('Subtitle file name parsed successfully', {
        'language': language,
        'language_name': get_language_name(language or DEFAULT_LANGUAGE),
    })


@subtitles_bp.route('/episodes/<uuid:episode_id>/subtitles')
def episode_subtitles(episode_id: uuid.UUID):
    episode = db.session.get(MovieEpisode, episode_id)
    if not episode:
        current_app.logger.info(f"Subtitles requested for unknown episode {episode_id}")
        return not_found('Episode not found')

    subtitles = Subtitle.query.filter_by(episode_id=episode.id) \
        .order_by(Subtitle.language.asc()).all()
    return success('Subtitles retrieved successfully', [sub.to_dict() for sub in subtitles])
