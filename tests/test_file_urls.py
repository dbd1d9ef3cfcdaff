import datetime
from unittest.mock import MagicMock, patch

from botocore.exceptions import ClientError, NoCredentialsError

from medialib.lib.file_urls import (
    get_user_file_directory, get_object_key, build_file_url, build_file_url_sync,
    build_community_post_file_url, build_avatar_url, build_banner_url, serialize_user_with_urls,
)


def test_user_file_directory():
    assert get_user_file_directory(datetime.datetime(2025, 3, 7, 15, 30)) == '2025/03/07'


def test_object_key():
    assert get_object_key('2025/10/02', 'a.jpg') == '2025/10/02/a.jpg'
    assert get_object_key('2025/10/02', 'a.jpg', 'avatars') == 'avatars/2025/10/02/a.jpg'
    assert get_object_key(None, 'a.jpg') is None
    assert get_object_key('2025/10/02', '') is None


def test_sync_url_with_cdn(app):
    app.config['CDN_URL'] = 'https://cdn.example.com/'
    assert build_file_url_sync('2025/10/02', 'a.jpg', 'avatars') == 'https://cdn.example.com/avatars/2025/10/02/a.jpg'


def test_sync_url_without_cdn_returns_object_key(app):
    assert build_file_url_sync('2025/10/02', 'a.jpg') == '2025/10/02/a.jpg'
    assert build_file_url_sync(None, 'a.jpg') is None


def test_file_url_with_cdn_skips_s3(app):
    app.config['CDN_URL'] = 'https://cdn.example.com'
    with patch('medialib.lib.file_urls.get_s3_client') as get_client:
        url = build_file_url('2025/10/02', 'v.mp4', 'videos')
    assert url == 'https://cdn.example.com/videos/2025/10/02/v.mp4'
    get_client.assert_not_called()


def test_file_url_presigned(app):
    s3 = MagicMock()
    s3.generate_presigned_url.return_value = 'https://s3.example.test/signed'
    with patch('medialib.lib.file_urls.get_s3_client', return_value=s3):
        url = build_file_url('2025/10/02', 'v.mp4', 'videos')

    assert url == 'https://s3.example.test/signed'
    s3.generate_presigned_url.assert_called_once_with(
        'get_object',
        Params={'Bucket': 'media-test', 'Key': 'videos/2025/10/02/v.mp4'},
        ExpiresIn=3600,
    )


def test_file_url_presign_failure_falls_back_to_direct_url(app):
    s3 = MagicMock()
    s3.generate_presigned_url.side_effect = NoCredentialsError()
    with patch('medialib.lib.file_urls.get_s3_client', return_value=s3):
        url = build_file_url('2025/10/02', 'v.mp4')
    assert url == 'https://s3.example.test/media-test/2025/10/02/v.mp4'


def test_community_post_url(app):
    s3 = MagicMock()
    s3.generate_presigned_url.side_effect = ClientError({'Error': {'Code': '403'}}, 'GetObject')
    with patch('medialib.lib.file_urls.get_s3_client', return_value=s3):
        assert build_community_post_file_url('2025/10/02/post', 'p.jpg') is None

    app.config['CDN_URL'] = 'https://cdn.example.com'
    assert build_community_post_file_url('2025/10/02/post', 'p.jpg') == \
        'https://cdn.example.com/community-posts/2025/10/02/post/p.jpg'
    assert build_community_post_file_url(None, 'p.jpg') is None


def test_avatar_and_banner_urls(app):
    app.config['CDN_URL'] = 'https://cdn.example.com'
    user = {'avatar': 'me.jpg', 'banner': 'b.jpg', 'file_directory': '2025/10/02'}
    assert build_avatar_url(user) == 'https://cdn.example.com/avatars/2025/10/02/me.jpg'
    assert build_banner_url(user) == 'https://cdn.example.com/banners/2025/10/02/b.jpg'


def test_avatar_falls_back_to_external_url(app):
    user = {'avatar': 'me.jpg', 'avatar_url': 'https://oauth.example.com/me.png'}
    assert build_avatar_url(user) == 'https://oauth.example.com/me.png'
    assert build_banner_url({}) is None


def test_serialize_user_with_urls(app, user):
    data = serialize_user_with_urls(user)
    assert data['username'] == 'alice'
    assert data['avatar_url'] == 'avatars/2025/10/02/avatar.jpg'
    assert data['banner_url'] == 'https://images.example.com/banner.png'
    for field in ('avatar', 'banner', 'file_directory'):
        assert field not in data
