"""
Integration tests for the central error handler.
Store failures and unexpected exceptions must become a generic 500
without leaking internal detail.
"""
import pytest
from fastapi.testclient import TestClient

from errors import StoreUnavailable


def test_store_failure_is_generic_500(client, memory_store, mocker):
    mocker.patch.object(
        memory_store, 'get_all', side_effect=StoreUnavailable('connection refused on 10.0.0.7:5432'),
    )

    response = client.get('/api/v1/games')

    assert response.status_code == 500
    assert response.json() == {'success': False, 'data': None, 'message': 'Internal server error'}
    assert '10.0.0.7' not in response.text


def test_store_failure_on_write(client, memory_store, admin_headers, sample_game, mocker):
    mocker.patch.object(memory_store, 'add', side_effect=StoreUnavailable('quota exceeded'))

    response = client.post('/api/v1/games', json=sample_game, headers=admin_headers)

    assert response.status_code == 500
    assert response.json()['message'] == 'Internal server error'


def test_store_failure_is_not_retried(client, memory_store, mocker):
    failing = mocker.patch.object(memory_store, 'get_all', side_effect=StoreUnavailable('down'))

    client.get('/api/v1/games')

    assert failing.call_count == 1


def test_unexpected_exception_is_generic_500(app, memory_store, mocker):
    mocker.patch.object(memory_store, 'get_by_id', side_effect=RuntimeError('secret stack detail'))

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get('/api/v1/games/abc')

    assert response.status_code == 500
    assert response.json()['message'] == 'Internal server error'
    assert 'secret stack detail' not in response.text


@pytest.mark.parametrize('path', ['/api/v1/games', '/api/v1/games/abc'])
def test_wrong_method_uses_envelope(client, path):
    response = client.patch(path, json={})

    assert response.status_code == 405
    assert response.json()['success'] is False


def test_store_errors_are_not_retryable():
    assert StoreUnavailable('down').retryable is False
