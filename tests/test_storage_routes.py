"""Tests for the /api/storage endpoints."""

import io
import re
from datetime import datetime

from mail_storage_api.main import create_app

TEN_MIB = 10 * 1024 * 1024


def _upload(client, content: bytes, name: str = 'report.pdf', field: str = 'file'):
    return client.post(
        '/api/storage/upload',
        data={field: (io.BytesIO(content), name)},
        content_type='multipart/form-data',
    )


def _listed(client):
    response = client.get('/api/storage/files')
    assert response.status_code == 200
    return response.get_json()['files']


def test_upload_list_delete_scenario(client):
    content = b'%PDF' + b'x' * 4996
    response = _upload(client, content)
    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['message'] == 'File uploaded successfully'
    assert data['file']['originalname'] == 'report.pdf'
    assert data['file']['size'] == 5000

    stored = data['file']['filename']
    assert re.fullmatch(r'\d+-\d+-report\.pdf', stored)

    files = _listed(client)
    assert [f['size'] for f in files if f['filename'] == stored] == [5000]

    response = client.delete(f'/api/storage/files/{stored}')
    assert response.status_code == 200
    assert response.get_json() == {'success': True, 'message': 'File deleted successfully'}
    assert stored not in [f['filename'] for f in _listed(client)]

    response = client.delete(f'/api/storage/files/{stored}')
    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'message': 'File not found'}


def test_upload_adds_exactly_one_entry(client):
    _upload(client, b'first', name='a.txt')
    before = _listed(client)

    response = _upload(client, b'second file', name='b.txt')
    after = _listed(client)

    assert len(after) == len(before) + 1
    new = [f for f in after if f['filename'] == response.get_json()['file']['filename']]
    assert len(new) == 1
    assert new[0]['size'] == len(b'second file')


def test_uploaded_at_is_iso8601_utc(client):
    data = _upload(client, b'abc').get_json()
    uploaded_at = data['file']['uploadedAt']
    assert uploaded_at.endswith('Z')
    datetime.fromisoformat(uploaded_at.replace('Z', '+00:00'))

    listed = _listed(client)[0]['uploadedAt']
    assert listed.endswith('Z')
    datetime.fromisoformat(listed.replace('Z', '+00:00'))


def test_download_returns_identical_bytes(client):
    content = bytes(range(256)) * 40
    stored = _upload(client, content, name='blob.bin').get_json()['file']['filename']

    response = client.get(f'/api/storage/download/{stored}')
    assert response.status_code == 200
    assert response.data == content
    disposition = response.headers['Content-Disposition']
    assert disposition.startswith('attachment')
    assert stored in disposition


def test_download_missing_file_is_404(client):
    response = client.get('/api/storage/download/nothing-here.txt')
    assert response.status_code == 404
    assert response.get_json()['message'] == 'File not found'


def test_delete_missing_file_is_404(client):
    response = client.delete('/api/storage/files/nothing-here.txt')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_upload_without_file_is_400(client):
    response = client.post('/api/storage/upload', data={}, content_type='multipart/form-data')
    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'message': 'No file uploaded'}


def test_upload_with_empty_filename_is_400(client):
    response = _upload(client, b'', name='')
    assert response.status_code == 400
    assert response.get_json()['message'] == 'No file uploaded'


def test_upload_with_unexpected_field_is_rejected(client):
    response = _upload(client, b'abc', field='attachment')
    assert response.status_code == 400
    assert response.get_json()['message'] == 'Unexpected field'
    assert _listed(client) == []


def test_upload_over_limit_is_rejected(client):
    response = _upload(client, b'x' * (TEN_MIB + 1), name='big.bin')
    assert response.status_code == 413
    data = response.get_json()
    assert data['success'] is False
    assert data['message'] == 'File too large'
    assert _listed(client) == []


def test_upload_strips_client_directories(client):
    data = _upload(client, b'abc', name='home/me/notes.txt').get_json()
    assert data['file']['originalname'] == 'home/me/notes.txt'
    assert data['file']['filename'].endswith('-notes.txt')


def test_list_empty_directory(client):
    assert client.get('/api/storage/files').get_json() == {'success': True, 'files': []}


def test_list_failure_is_500(client, uploads_dir):
    uploads_dir.rmdir()
    response = client.get('/api/storage/files')
    assert response.status_code == 500
    data = response.get_json()
    assert data['message'] == 'Failed to list files'
    assert data['error']


def test_uuid_strategy_names(settings, mail_transport):
    settings = settings.model_copy(update={'stored_name_strategy': 'uuid'})
    client = create_app(settings, mail_transport=mail_transport).test_client()

    stored = _upload(client, b'abc', name='a.txt').get_json()['file']['filename']
    assert re.fullmatch(r'[0-9a-f]{32}-a\.txt', stored)


def test_strict_paths_hide_parent_directory(settings, mail_transport):
    settings = settings.model_copy(update={'strict_storage_paths': True})
    client = create_app(settings, mail_transport=mail_transport).test_client()

    assert client.delete('/api/storage/files/..').status_code == 404
    assert client.get('/api/storage/download/..').status_code == 404


def test_upload_write_failure_is_500(client, uploads_dir):
    response = _upload(client, b'abc', name='a' * 300 + '.txt')
    assert response.status_code == 500
    data = response.get_json()
    assert data['success'] is False
    assert data['message'] == 'Failed to upload file'
    assert data['error']
    assert list(uploads_dir.iterdir()) == []


def test_delete_failure_after_existence_check_is_500(client, uploads_dir):
    (uploads_dir / 'nested').mkdir()

    response = client.delete('/api/storage/files/nested')
    assert response.status_code == 500
    data = response.get_json()
    assert data['success'] is False
    assert data['message'] == 'Failed to delete file'
    assert data['error']
    assert (uploads_dir / 'nested').is_dir()
