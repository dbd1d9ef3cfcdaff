"""Build public URLs for files stored in S3-compatible storage.

With ``CDN_URL`` configured every file is served from the CDN. Without it
the sync helpers return the bare object key (the client asks the API for a
presigned URL later) and the other helpers presign a GET URL directly.
"""
import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from flask import current_app

logger = logging.getLogger(__name__)

AVATARS_FOLDER = 'avatars'
BANNERS_FOLDER = 'banners'
COMMUNITY_POSTS_FOLDER = 'community-posts'


def get_s3_client():
    """Create an S3 client from the app configuration."""
    cfg = current_app.config
    kwargs = {
        'region_name': cfg.get('S3_REGION'),
        'config': Config(signature_version='s3v4', s3={'addressing_style': 'path'}),
    }
    if cfg.get('S3_ENDPOINT'):
        kwargs['endpoint_url'] = cfg['S3_ENDPOINT']
    if cfg.get('S3_ACCESS_KEY_ID') and cfg.get('S3_SECRET_ACCESS_KEY'):
        kwargs['aws_access_key_id'] = cfg['S3_ACCESS_KEY_ID']
        kwargs['aws_secret_access_key'] = cfg['S3_SECRET_ACCESS_KEY']
    return boto3.client('s3', **kwargs)


def _cdn_url():
    cdn_url = (current_app.config.get('CDN_URL') or '').strip()
    return cdn_url.rstrip('/') if cdn_url else ''


def _field(obj, name):
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def get_user_file_directory(created_at):
    """File directory based on the user's creation date: yyyy/mm/dd."""
    return created_at.strftime('%Y/%m/%d')


def get_object_key(file_directory, file_name, folder=None):
    if not file_directory or not file_name:
        return None

    if folder:
        return f"{folder}/{file_directory}/{file_name}"
    return f"{file_directory}/{file_name}"


def generate_presigned_url(object_key):
    s3_client = get_s3_client()
    return s3_client.generate_presigned_url(
        'get_object',
        Params={'Bucket': current_app.config['S3_BUCKET_NAME'], 'Key': object_key},
        ExpiresIn=current_app.config.get('S3_PRESIGNED_URL_EXPIRY', 3600),
    )


def build_file_url(file_directory, file_name, folder=None):
    """
    Build a file URL: the CDN URL if available, otherwise an S3 presigned URL.

    Args:
        file_directory: File directory path (e.g. "2025/10/02")
        file_name: File name (e.g. "uuid.jpg")
        folder: Optional folder prefix (e.g. "avatars", "videos", "chat/photo")

    Returns:
        Full URL to the file, or None if the directory or name is missing
    """
    object_key = get_object_key(file_directory, file_name, folder)
    if not object_key:
        return None

    cdn_url = _cdn_url()
    if cdn_url:
        return f"{cdn_url}/{object_key}"

    try:
        return generate_presigned_url(object_key)
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Error generating presigned URL for {object_key}: {e}")
        # Direct S3 URL, only works for public buckets
        cfg = current_app.config
        return f"{cfg.get('S3_ENDPOINT', '')}/{cfg.get('S3_BUCKET_NAME', '')}/{object_key}"


def build_file_url_sync(file_directory, file_name, folder=None):
    """CDN URL if available, otherwise the object key for presigned URL generation."""
    object_key = get_object_key(file_directory, file_name, folder)
    if not object_key:
        return None

    cdn_url = _cdn_url()
    if cdn_url:
        return f"{cdn_url}/{object_key}"

    return object_key


def build_community_post_file_url(file_directory, file_name):
    object_key = get_object_key(file_directory, file_name, COMMUNITY_POSTS_FOLDER)
    if not object_key:
        return None

    cdn_url = _cdn_url()
    if cdn_url:
        return f"{cdn_url}/{object_key}"

    try:
        return generate_presigned_url(object_key)
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Error generating presigned URL for community post file {object_key}: {e}")
        return None


def build_avatar_url(user):
    """Storage-backed avatar URL, falling back to the external avatar URL."""
    avatar = _field(user, 'avatar')
    file_directory = _field(user, 'file_directory')
    if avatar and file_directory:
        return build_file_url_sync(file_directory, avatar, AVATARS_FOLDER)

    return _field(user, 'avatar_url') or None


def build_banner_url(user):
    """Storage-backed banner URL, falling back to the external banner URL."""
    banner = _field(user, 'banner')
    file_directory = _field(user, 'file_directory')
    if banner and file_directory:
        return build_file_url_sync(file_directory, banner, BANNERS_FOLDER)

    return _field(user, 'banner_url') or None


def serialize_user_with_urls(user):
    """Serialize a user with computed image URLs and without storage fields."""
    data = dict(user) if isinstance(user, dict) else user.to_dict()
    data['avatar_url'] = build_avatar_url(user)
    data['banner_url'] = build_banner_url(user)
    for field in ('avatar', 'banner', 'file_directory'):
        data.pop(field, None)
    return data
