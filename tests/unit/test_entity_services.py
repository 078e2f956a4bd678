"""
Unit tests for the entity services (games, matches, players).
Tests: create/get round trip, merge-on-provided-fields updates, delete,
       not-found handling and value isolation of returned records.
"""
import asyncio
from datetime import datetime, timezone

import pytest

from errors import GameNotFound, MatchNotFound, PlayerNotFound
from services import GameService, MatchService, PlayerService


@pytest.fixture
def games(repository):
    return GameService(repository)


@pytest.fixture
def matches(repository):
    return MatchService(repository)


@pytest.fixture
def players(repository):
    return PlayerService(repository)


class TestCreateAndGet:

    def test_game_round_trip(self, games, sample_game):
        """create then get_by_id yields the input plus the assigned id."""
        created = asyncio.run(games.create(sample_game))
        fetched = asyncio.run(games.get_by_id(created['id']))

        assert created['id']
        assert fetched == {'id': created['id'], **sample_game}
        assert created == fetched

    def test_player_round_trip(self, players, sample_player):
        created = asyncio.run(players.create(sample_player))

        assert asyncio.run(players.get_by_id(created['id'])) == {'id': created['id'], **sample_player}

    def test_match_round_trip(self, matches):
        played = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        data = {'gameId': 'game123', 'playerId': 'player456', 'score': 1500, 'timestamp': played}

        created = asyncio.run(matches.create(data))

        assert asyncio.run(matches.get_by_id(created['id'])) == {'id': created['id'], **data}

    def test_id_comes_from_store(self, games, memory_store, sample_game):
        created = asyncio.run(games.create(sample_game))

        assert created['id'] in memory_store.collections['games']
        assert 'id' not in memory_store.collections['games'][created['id']]

    def test_list_all(self, games, sample_game):
        first = asyncio.run(games.create(sample_game))
        second = asyncio.run(games.create({**sample_game, 'name': 'Pac-Man'}))

        listed = asyncio.run(games.list_all())

        assert sorted(g['id'] for g in listed) == sorted([first['id'], second['id']])

    def test_list_all_empty(self, players):
        assert asyncio.run(players.list_all()) == []

    def test_missing_id_raises_entity_not_found(self, games, matches, players):
        with pytest.raises(GameNotFound):
            asyncio.run(games.get_by_id('does-not-exist'))
        with pytest.raises(MatchNotFound):
            asyncio.run(matches.get_by_id('does-not-exist'))
        with pytest.raises(PlayerNotFound) as exc_info:
            asyncio.run(players.get_by_id('does-not-exist'))
        assert str(exc_info.value) == 'Player with ID does-not-exist not found'


class TestCreationDefaults:

    def test_match_timestamp_defaults_to_now(self, matches):
        before = datetime.now(timezone.utc)
        created = asyncio.run(matches.create({'gameId': 'g', 'playerId': 'p', 'score': 0}))

        assert before <= created['timestamp'] <= datetime.now(timezone.utc)

    def test_player_defaults(self, players):
        created = asyncio.run(players.create({'username': 'newbie'}))

        assert created['achievements'] == ''
        assert created['totalGamesPlayed'] == 0

    def test_supplied_values_win_over_defaults(self, players):
        created = asyncio.run(players.create({'username': 'pro', 'totalGamesPlayed': 7}))

        assert created['totalGamesPlayed'] == 7

    def test_unknown_fields_are_dropped(self, games, memory_store, sample_game):
        created = asyncio.run(games.create({**sample_game, 'rating': 5}))

        assert 'rating' not in created
        assert 'rating' not in memory_store.collections['games'][created['id']]

    def test_unvalidated_values_are_stored_as_given(self, players):
        """Bypassing validation must not crash or coerce."""
        created = asyncio.run(players.create({'username': 'odd', 'totalGamesPlayed': '-3'}))

        assert created['totalGamesPlayed'] == '-3'


class TestUpdate:

    def test_omitted_fields_are_untouched(self, players, sample_player):
        created = asyncio.run(players.create(sample_player))

        updated = asyncio.run(players.update(created['id'], {'totalGamesPlayed': 25}))

        assert updated['username'] == 'gamer123'
        assert updated['achievements'] == sample_player['achievements']
        assert updated['totalGamesPlayed'] == 25
        assert asyncio.run(players.get_by_id(created['id'])) == updated

    def test_empty_value_clears_field(self, players, sample_player):
        """An explicit empty string is a value, not an omission."""
        created = asyncio.run(players.create(sample_player))

        updated = asyncio.run(players.update(created['id'], {'achievements': ''}))

        assert updated['achievements'] == ''
        assert updated['username'] == 'gamer123'

    def test_empty_changes_is_noop(self, games, sample_game):
        created = asyncio.run(games.create(sample_game))

        assert asyncio.run(games.update(created['id'], {})) == created

    def test_update_with_previous_record_is_idempotent(self, matches):
        created = asyncio.run(matches.create({'gameId': 'g', 'playerId': 'p', 'score': 10}))

        updated = asyncio.run(matches.update(created['id'], created))

        assert updated == created
        assert asyncio.run(matches.get_by_id(created['id'])) == created

    def test_full_merged_record_is_persisted(self, games, memory_store, sample_game):
        created = asyncio.run(games.create(sample_game))

        asyncio.run(games.update(created['id'], {'modes': 'Co-op'}))

        assert memory_store.collections['games'][created['id']] == {**sample_game, 'modes': 'Co-op'}

    def test_update_missing_raises_without_writing(self, games, memory_store):
        with pytest.raises(GameNotFound):
            asyncio.run(games.update('ghost', {'name': 'x'}))

        assert memory_store.writes() == []


class TestDelete:

    def test_delete_then_get_is_not_found(self, matches):
        created = asyncio.run(matches.create({'gameId': 'g', 'playerId': 'p', 'score': 10}))

        asyncio.run(matches.delete(created['id']))

        with pytest.raises(MatchNotFound):
            asyncio.run(matches.get_by_id(created['id']))

    def test_delete_missing_raises_without_writing(self, players, memory_store):
        with pytest.raises(PlayerNotFound):
            asyncio.run(players.delete('ghost'))

        assert memory_store.writes() == []

    def test_no_transition_out_of_deleted(self, games, sample_game):
        created = asyncio.run(games.create(sample_game))
        asyncio.run(games.delete(created['id']))

        with pytest.raises(GameNotFound):
            asyncio.run(games.update(created['id'], {'name': 'Back'}))
        with pytest.raises(GameNotFound):
            asyncio.run(games.delete(created['id']))


class TestValueIsolation:

    def test_mutating_created_record_does_not_leak(self, games, sample_game):
        created = asyncio.run(games.create(sample_game))
        created['name'] = 'Mutated'

        assert asyncio.run(games.get_by_id(created['id']))['name'] == 'Space Invaders'

    def test_mutating_input_after_create_does_not_leak(self, players):
        data = {'username': 'gamer123'}
        created = asyncio.run(players.create(data))
        data['username'] = 'changed'

        assert created['username'] == 'gamer123'

    def test_updated_record_is_a_copy(self, players, sample_player):
        created = asyncio.run(players.create(sample_player))
        updated = asyncio.run(players.update(created['id'], {'totalGamesPlayed': 11}))
        updated['totalGamesPlayed'] = 999

        assert asyncio.run(players.get_by_id(created['id']))['totalGamesPlayed'] == 11
