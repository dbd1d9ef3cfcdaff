import uuid

from flask import Blueprint
from ..extensions import db
from ..models import User
from ..lib.file_urls import serialize_user_with_urls
from ..lib.responses import success, not_found

users_bp = Blueprint('users', __name__, url_prefix='/api/users')


@users_bp.route('/<uuid:user_id>')
def user_detail(user_id: uuid.UUID):
    """Public profile with avatar and banner URLs resolved."""
    user = db.session.get(User, user_id)
    if not user:
        return not_found('User not found')
    return success('User retrieved successfully', serialize_user_with_urls(user))
