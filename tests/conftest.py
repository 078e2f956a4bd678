"""
Pytest configuration and fixtures for the game tracker API tests.
"""
import copy
import itertools
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing config
os.environ.setdefault('GAMETRACKER_JWT_SECRET', 'test-secret')
os.environ.setdefault('GAMETRACKER_BCRYPT_ROUNDS', '4')
os.environ.setdefault('GAMETRACKER_STORE_BACKEND', 'sqlite')

from fastapi.testclient import TestClient

from main import create_app
from models import ROLE_ADMIN, ROLE_MANAGER, ROLE_PLAYER
from stores import Document, DocumentRepository, DocumentStore
from utils.tokens import create_access_token


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed DocumentStore that records every call it receives."""

    def __init__(self):
        self.collections = {}
        self.calls = []
        self._ids = itertools.count(1)

    def writes(self):
        return [call for call in self.calls if call[0] in ('add', 'set', 'delete')]

    async def add(self, collection, fields):
        self.calls.append(('add', collection))
        document_id = f'{collection}-{next(self._ids)}'
        self.collections.setdefault(collection, {})[document_id] = copy.deepcopy(fields)
        return document_id

    async def get_all(self, collection):
        self.calls.append(('get_all', collection))
        return [
            Document(id=doc_id, fields=copy.deepcopy(fields))
            for doc_id, fields in self.collections.get(collection, {}).items()
        ]

    async def get_by_id(self, collection, document_id):
        self.calls.append(('get_by_id', collection))
        fields = self.collections.get(collection, {}).get(document_id)
        if fields is None:
            return None
        return Document(id=document_id, fields=copy.deepcopy(fields))

    async def set(self, collection, document_id, fields):
        self.calls.append(('set', collection))
        self.collections.setdefault(collection, {})[document_id] = copy.deepcopy(fields)

    async def delete(self, collection, document_id):
        self.calls.append(('delete', collection))
        self.collections.get(collection, {}).pop(document_id, None)


@pytest.fixture
def memory_store():
    return InMemoryDocumentStore()


@pytest.fixture
def repository(memory_store):
    return DocumentRepository(memory_store)


@pytest.fixture
def app(memory_store):
    """Create application for testing."""
    return create_app(document_store=memory_store)


@pytest.fixture
def client(app):
    """Create test client (runs the app's startup and shutdown)."""
    with TestClient(app) as test_client:
        yield test_client


def bearer(role, subject=None):
    token = create_access_token(subject or f'{role}-account', role)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def admin_headers():
    return bearer(ROLE_ADMIN)


@pytest.fixture
def manager_headers():
    return bearer(ROLE_MANAGER)


@pytest.fixture
def player_headers():
    return bearer(ROLE_PLAYER)


@pytest.fixture
def sample_game():
    return {
        'name': 'Space Invaders',
        'description': 'Classic arcade space shooting game',
        'modes': 'Single Player, Multiplayer',
    }


@pytest.fixture
def sample_player():
    return {
        'username': 'gamer123',
        'achievements': 'First Win, High Score Champion',
        'totalGamesPlayed': 10,
    }
