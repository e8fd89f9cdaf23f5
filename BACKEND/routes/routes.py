"""
Flask Routes (Controllers) for the Esports Management Platform

This module contains all route handlers organized into blueprints.
Demonstrates MVC Pattern: Routes act as Controllers

Blueprints:
- main_bp: Connectivity check
- api_bp: JSON API endpoints (teams, players, matches, leaderboard,
  search, users, reports)

Author: Esports Platform Team
"""

from flask import Blueprint, request, jsonify, current_app

from data_structures import UnknownVertexError
from managers import (as_number, leaderboard_manager, search_engine, match_graph_manager,
                      record_manager, user_manager, report_manager)
from models import db

# Create blueprints
main_bp = Blueprint('main', __name__)
api_bp = Blueprint('api', __name__)


def _server_error(message, exc, body=None):
    """
    Log the failure, discard the session and build a 500 response.
    `body` replaces the default {"error": str(exc)} payload.
    """
    current_app.logger.error(f"{message}: {exc}")
    db.session.rollback()
    return jsonify(body if body is not None else {'error': str(exc)}), 500


# ============================================================================
# MAIN ROUTES
# ============================================================================

@main_bp.route('/test-cors')
def test_cors():
    """Echo the caller's origin so front-ends can check CORS."""
    return jsonify({'message': 'CORS is working!', 'origin': request.headers.get('Origin')})


# ============================================================================
# TEAM / PLAYER / MATCH ROUTES
# ============================================================================

def _create(kind):
    try:
        key, error = record_manager.create(kind, request.get_json(silent=True))
        if error:
            return jsonify({'error': error}), 400
        return jsonify({'success': True, 'key': key})
    except Exception as e:
        return _server_error(f"Server failed to write {kind}", e)


def _list(kind):
    try:
        return jsonify(record_manager.list_all(kind))
    except Exception as e:
        return _server_error(f"Server failed to read {kind}", e)


@api_bp.route('/team', methods=['POST'])
def create_team():
    """Create a team. Requires a non-empty 'name'."""
    return _create('team')


@api_bp.route('/team', methods=['GET'])
def list_teams():
    return _list('team')


@api_bp.route('/players', methods=['POST'])
def create_player():
    """Create a player. Requires a non-empty 'username'."""
    return _create('player')


@api_bp.route('/players', methods=['GET'])
def list_players():
    return _list('player')


@api_bp.route('/match', methods=['POST'])
def create_match():
    """Create a match. Requires a non-empty 'tournament_id'."""
    return _create('match')


@api_bp.route('/match', methods=['GET'])
def list_matches():
    return _list('match')


@api_bp.route('/match/<key>', methods=['DELETE'])
def delete_match(key):
    try:
        record_manager.delete('match', key)
        return jsonify({'success': True})
    except Exception as e:
        return _server_error("Server failed to delete match", e)


@api_bp.route('/match/opponents/<team>')
def match_opponents(team):
    """
    Teams connected to `team` through match history

    Returns:
        JSON: direct opponents and every team reachable by BFS
    """
    try:
        return jsonify(match_graph_manager.get_opponents(team))
    except UnknownVertexError:
        return jsonify({'error': 'Team not found in match history'}), 404
    except Exception as e:
        return _server_error("Opponent lookup failed", e)


# ============================================================================
# LEADERBOARD ROUTES
# ============================================================================

@api_bp.route('/leaderboard')
def leaderboard():
    """
    Leaderboard API using the custom MinHeap

    Query Parameters:
    - limit: Number of players (default 10)
    - sortBy: rating | matches | wins | kills (default rating)

    Returns:
        JSON: Top players plus the number of rated players considered
    """
    try:
        limit = leaderboard_manager.effective_limit(request.args.get('limit', type=int))
        sort_by = request.args.get('sortBy', current_app.config.get('LEADERBOARD_DEFAULT_SORT', 'rating'))

        top_players, total = leaderboard_manager.get_leaderboard(limit, sort_by)

        return jsonify({
            'success': True,
            'leaderboard': top_players,
            'totalPlayers': total,
            'sortBy': sort_by,
            'limit': limit
        })
    except Exception as e:
        return _server_error("Leaderboard error", e,
                             {'success': False, 'error': 'Failed to fetch leaderboard data'})


@api_bp.route('/leaderboard/update-rating', methods=['POST'])
def update_rating():
    """
    Update a player's rating after a match

    Body:
    - playerId, newRating (required), matchResult ('win' | 'loss')
    """
    data = request.get_json(silent=True) or {}
    player_id = data.get('playerId')
    # Numbers or numeric strings only
    new_rating = as_number(data.get('newRating'), default=None)

    if not player_id or new_rating is None:
        return jsonify({'success': False, 'error': 'Player ID and new rating are required'}), 400

    try:
        _, error = leaderboard_manager.update_rating(player_id, new_rating, data.get('matchResult'))
        if error:
            return jsonify({'success': False, 'error': error}), 404

        return jsonify({
            'success': True,
            'message': 'Player rating updated successfully',
            'playerId': player_id,
            'newRating': new_rating
        })
    except Exception as e:
        return _server_error("Update rating error", e,
                             {'success': False, 'error': 'Failed to update player rating'})


# ============================================================================
# SEARCH ROUTES
# ============================================================================

@api_bp.route('/search/<prefix>')
def search_players(prefix):
    """
    Username prefix search using the custom Trie

    Returns:
        JSON: Users whose email local part starts with prefix
    """
    try:
        matches = search_engine.search(prefix)
        return jsonify({'prefix': prefix, 'matches': matches, 'count': len(matches)})
    except Exception as e:
        return _server_error("Player search error", e)


# ============================================================================
# USER ROUTES
# ============================================================================

@api_bp.route('/users/<uid>/profile', methods=['POST'])
def sync_profile(uid):
    """Create or refresh a user's profile. Requires 'role'."""
    try:
        role, error = user_manager.sync_profile(uid, request.get_json(silent=True))
        if error:
            return jsonify({'error': error}), 400
        return jsonify({'success': True, 'role': role})
    except Exception as e:
        return _server_error("Profile sync failed", e)


@api_bp.route('/users/<uid>')
def get_user(uid):
    try:
        profile = user_manager.get_profile(uid)
        if not profile:
            return jsonify({'error': 'Profile not found'}), 404
        return jsonify({'uid': uid, **profile})
    except Exception as e:
        return _server_error("Profile lookup failed", e)


# ============================================================================
# REPORT ROUTES
# ============================================================================

@api_bp.route('/reports', methods=['POST'])
def reports():
    """Sample report rows for reportType = player | tournament | match"""
    data = request.get_json(silent=True) or {}
    return jsonify(report_manager.get_report(data.get('reportType')))
