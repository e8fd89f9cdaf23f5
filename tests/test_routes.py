from app import create_app
from models import db, Record
from realtime_db import rtdb


def _seed_players():
    ratings = {'alice': 18.4, 'bob': 12.2, 'carol': 20.0, 'dave': 9.9}
    keys = {}
    for name, rating in ratings.items():
        keys[name] = rtdb.ref('players').push({
            'username': name, 'avg_rating': rating, 'kills': len(name) * 10,
        })
    rtdb.ref('players').push({'username': 'unrated'})
    return keys


def test_cors_probe(client):
    resp = client.get('/test-cors', headers={'Origin': 'http://localhost:5173'})
    assert resp.status_code == 200
    assert resp.json == {'message': 'CORS is working!', 'origin': 'http://localhost:5173'}
    assert resp.headers['Access-Control-Allow-Origin'] == 'http://localhost:5173'


def test_cors_rejects_foreign_origin(client):
    resp = client.get('/test-cors', headers={'Origin': 'http://evil.example'})
    assert 'Access-Control-Allow-Origin' not in resp.headers


def test_team_crud(client):
    assert client.get('/api/team').json == {}

    resp = client.post('/api/team', json={'game': 'Dota 2'})
    assert resp.status_code == 400
    assert resp.json['error'] == 'team payload missing or name empty'

    resp = client.post('/api/team', json={'name': 'Night Owls'})
    assert resp.status_code == 200
    key = resp.json['key']
    assert client.get('/api/team').json == {key: {'name': 'Night Owls'}}


def test_player_requires_username(client):
    resp = client.post('/api/players', json={})
    assert resp.status_code == 400
    assert resp.json['error'] == 'player payload missing or username empty'
    resp = client.post('/api/players', data='not json', content_type='text/plain')
    assert resp.status_code == 400


def test_match_create_list_delete(client):
    resp = client.post('/api/match', json={'team1': 'A'})
    assert resp.status_code == 400

    key = client.post('/api/match', json={'tournament_id': 't1', 'team1': 'A', 'team2': 'B'}).json['key']
    assert list(client.get('/api/match').json) == [key]

    assert client.delete(f'/api/match/{key}').json == {'success': True}
    assert client.get('/api/match').json == {}
    assert client.delete(f'/api/match/{key}').status_code == 200


def test_match_opponents(client):
    client.post('/api/match', json={'tournament_id': 't', 'team1': 'Owls', 'team2': 'Wolves'})
    client.post('/api/match', json={'tournament_id': 't', 'team1': 'Wolves', 'team2': 'Comets'})

    resp = client.get('/api/match/opponents/Comets')
    assert resp.status_code == 200
    assert resp.json == {'team': 'Comets', 'opponents': ['Wolves'], 'reachable': ['Comets', 'Wolves', 'Owls']}

    resp = client.get('/api/match/opponents/Sharks')
    assert resp.status_code == 404
    assert resp.json['error'] == 'Team not found in match history'


def test_leaderboard_default(client, app):
    _seed_players()
    resp = client.get('/api/leaderboard')
    assert resp.status_code == 200
    body = resp.json
    assert body['success'] is True
    assert body['totalPlayers'] == 4
    assert body['sortBy'] == 'rating'
    assert body['limit'] == 10
    assert [p['username'] for p in body['leaderboard']] == ['carol', 'alice', 'bob', 'dave']
    assert [p['rating'] for p in body['leaderboard']] == [2000, 1840, 1220, 990]


def test_leaderboard_limit_and_sort(client, app):
    _seed_players()
    body = client.get('/api/leaderboard?limit=3&sortBy=kills').json
    assert body['limit'] == 3
    assert body['totalPlayers'] == 4
    # carol, alice, bob by rating; then by kills (name length * 10)
    assert [p['username'] for p in body['leaderboard']] == ['carol', 'alice', 'bob']


def test_leaderboard_bad_limit_falls_back(client, app):
    _seed_players()
    body = client.get('/api/leaderboard?limit=lots').json
    assert body['limit'] == 10
    assert len(body['leaderboard']) == 4


def test_leaderboard_limit_is_capped(client, app):
    body = client.get('/api/leaderboard?limit=100000').json
    assert body['limit'] == app.config['LEADERBOARD_MAX_LIMIT']
    assert body['leaderboard'] == []


def test_update_rating(client, app):
    keys = _seed_players()
    resp = client.post('/api/leaderboard/update-rating',
                       json={'playerId': keys['dave'], 'newRating': 2500, 'matchResult': 'loss'})
    assert resp.status_code == 200
    assert resp.json['newRating'] == 2500

    stored = rtdb.ref('players').child(keys['dave']).once()
    assert stored['avg_rating'] == 25
    assert stored['losses'] == 1
    assert stored['matches_played'] == 1

    top = client.get('/api/leaderboard?limit=1').json['leaderboard']
    assert top[0]['username'] == 'dave'


def test_update_rating_validation(client):
    resp = client.post('/api/leaderboard/update-rating', json={'playerId': 'x'})
    assert resp.status_code == 400
    assert resp.json['success'] is False

    resp = client.post('/api/leaderboard/update-rating', json={'playerId': 'x', 'newRating': 0})
    assert resp.status_code == 404
    assert resp.json['error'] == 'Player not found'


def test_search_by_prefix(client):
    for uid, email in [('u1', 'alice@x.io'), ('u2', 'alicia@x.io'), ('u3', 'bob@x.io')]:
        client.post(f'/api/users/{uid}/profile', json={'email': email, 'role': 'player'})

    body = client.get('/api/search/ali').json
    assert body['prefix'] == 'ali'
    assert body['count'] == 2
    assert {m['username'] for m in body['matches']} == {'alice', 'alicia'}

    assert client.get('/api/search/z').json == {'prefix': 'z', 'matches': [], 'count': 0}


def test_user_profile_sync_and_fetch(client):
    resp = client.post('/api/users/u1/profile', json={'email': 'a@x.io'})
    assert resp.status_code == 400
    assert resp.json['error'] == 'Role is required'

    resp = client.post('/api/users/u1/profile', json={'email': 'a@x.io', 'role': 'manager', 'fullName': 'A B'})
    assert resp.json == {'success': True, 'role': 'manager'}

    body = client.get('/api/users/u1').json
    assert body['uid'] == 'u1'
    assert body['role'] == 'manager'
    assert body['fullName'] == 'A B'

    assert client.get('/api/users/ghost').status_code == 404


def test_reports(client):
    assert len(client.post('/api/reports', json={'reportType': 'match'}).json) == 2
    assert client.post('/api/reports', json={'reportType': 'nope'}).json == []


def test_unknown_route_is_json_404(client):
    resp = client.get('/api/nothing-here')
    assert resp.status_code == 404
    assert resp.json == {'error': 'Not found'}


def test_development_config_seeds_sample_data(monkeypatch, tmp_path):
    monkeypatch.setattr('config.DevelopmentConfig.SQLALCHEMY_DATABASE_URI',
                        'sqlite:///' + str(tmp_path / 'seed.db'))
    app = create_app('development')
    with app.app_context():
        assert Record.query.filter_by(path='players').count() == 4
        client = app.test_client()
        assert client.get('/api/leaderboard').json['totalPlayers'] == 3
        assert client.get('/api/search/ali').json['count'] == 2
        db.session.remove()
        db.drop_all()


def test_leaderboard_tolerates_loosely_typed_players(client, app):
    _seed_players()
    rtdb.ref('players').push({'username': 'broken', 'avg_rating': 'n/a'})
    rtdb.ref('players').push({'username': 'b', 'avg_rating': 10, 'wins': '2'})

    resp = client.get('/api/leaderboard')
    assert resp.status_code == 200
    assert resp.json['totalPlayers'] == 5
    assert 'broken' not in [p['username'] for p in resp.json['leaderboard']]

    resp = client.get('/api/leaderboard?sortBy=wins')
    assert resp.status_code == 200
    assert resp.json['leaderboard'][0]['username'] == 'b'
    assert resp.json['leaderboard'][0]['wins'] == 2


def test_update_rating_rejects_non_numeric_rating(client, app):
    keys = _seed_players()
    for bad in ('abc', None, True, [1500], {'value': 1500}):
        resp = client.post('/api/leaderboard/update-rating',
                           json={'playerId': keys['bob'], 'newRating': bad})
        assert resp.status_code == 400
        assert resp.json == {'success': False, 'error': 'Player ID and new rating are required'}
    assert rtdb.ref('players').child(keys['bob']).once()['avg_rating'] == 12.2


def test_update_rating_accepts_numeric_string(client, app):
    keys = _seed_players()
    resp = client.post('/api/leaderboard/update-rating',
                       json={'playerId': keys['bob'], 'newRating': '1500'})
    assert resp.status_code == 200
    assert resp.json['newRating'] == 1500
    assert rtdb.ref('players').child(keys['bob']).once()['avg_rating'] == 15


def test_update_rating_failure_is_json_500(client, app, monkeypatch):
    keys = _seed_players()

    def explode(*args, **kwargs):
        raise RuntimeError('store offline')

    monkeypatch.setattr('managers.leaderboard_manager.update_rating', explode)
    resp = client.post('/api/leaderboard/update-rating',
                       json={'playerId': keys['bob'], 'newRating': 1500})
    assert resp.status_code == 500
    assert resp.json == {'success': False, 'error': 'Failed to update player rating'}
