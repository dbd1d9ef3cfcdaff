from flask import Blueprint, current_app
from ..languages import get_language_name, normalize_language_code, list_languages
from ..lib.responses import success

languages_bp = Blueprint('languages', __name__, url_prefix='/api/languages')


@languages_bp.route('')
def languages_list():
    """All supported subtitle languages."""
    data = [{'code': code, 'name': name} for code, name in list_languages()]
    return success('Languages retrieved successfully', data)


@languages_bp.route('/<code>')
def language_detail(code):
    """Display name and normalized form of a single language code."""
    normalized = normalize_language_code(code)
    current_app.logger.debug(f"Language lookup: {code} -> {normalized}")
    return success('Language retrieved successfully', {
        'code': code.lower(),
        'name': get_language_name(code),
        'normalized': normalized,
    })
