"""
Business Logic Managers for the Esports Management Platform

This module demonstrates:
1. Data Structures: MinHeap (leaderboard), Trie (username search),
   Graph + Queue (match-history reachability)
2. Algorithms: Top-N selection, prefix search, breadth-first traversal

These manager classes handle business logic separately from routes (MVC
pattern). Ranking and search helpers take plain dictionaries that were
already read from the database, so they can be used without a request.

Author: Esports Platform Team
"""

import logging
import math
from datetime import datetime

import pytz

from data_structures import MinHeap, Trie, Graph
from realtime_db import rtdb, server_timestamp

SORT_FIELDS = {
    'rating': 'rating',
    'matches': 'matchesPlayed',
    'wins': 'wins',
    'kills': 'kills',
}


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def as_number(value, default=0):
    """
    Coerce a loosely typed stored value to a number.

    Numbers pass through, numeric strings are parsed, and anything else
    (None, booleans, "n/a", NaN, infinities) becomes `default`.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else default
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
        if not math.isfinite(number):
            return default
        return int(number) if number.is_integer() else number
    return default


class LeaderboardManager:
    """
    Leaderboard Manager Class - Ranks players by rating

    Data Structure: MIN HEAP keyed on the NEGATED rating, so the
    smallest key is the highest rating. The heap stays strictly
    min-ordered; the negation is only a convention of this manager.
    """

    def __init__(self, default_limit=10, max_limit=100):
        self.default_limit = default_limit
        self.max_limit = max_limit

    def init_app(self, app):
        """Pick up the limits from the application config."""
        self.default_limit = app.config.get('LEADERBOARD_DEFAULT_LIMIT', self.default_limit)
        self.max_limit = app.config.get('LEADERBOARD_MAX_LIMIT', self.max_limit)

    def effective_limit(self, limit=None):
        """The row count actually served: the default when unset, capped at max_limit."""
        if limit is None:
            limit = self.default_limit
        return min(limit, self.max_limit)

    @staticmethod
    def to_leaderboard_entry(player_id, player_data):
        """
        Project a stored player document onto the leaderboard row format.
        Ratings are stored as decimals (e.g. 15.5) and shown as integers (1550).
        """
        return {
            'id': player_id,
            'username': player_data.get('username') or 'Unknown Player',
            'email': player_data.get('email') or '',
            'rating': _round_half_up(as_number(player_data.get('avg_rating')) * 100),
            'matchesPlayed': as_number(player_data.get('matches_played')),
            'wins': as_number(player_data.get('wins')),
            'losses': as_number(player_data.get('losses')),
            'kills': as_number(player_data.get('kills')),
            'deaths': as_number(player_data.get('deaths')),
            'joinDate': player_data.get('join_date') or '',
            'role': player_data.get('role') or 'player',
            'game': player_data.get('game') or 'Dota 2',
        }

    def build_leaderboard(self, players_data, limit=None, sort_by='rating'):
        """
        Build the top-N leaderboard using the custom MinHeap

        Algorithm:
        1. Keep players that carry a rating
        2. Insert each with heap_rating = -rating
        3. Extract up to `limit` minimum keys (the highest ratings)
        4. Negate back, then re-sort the subset by the requested field

        Time Complexity: O(n log n) to build, O(k log n) to extract

        Args:
            players_data (dict): player id -> stored player document
            limit (int): Maximum rows to return
            sort_by (str): 'rating', 'matches', 'wins' or 'kills'

        Returns:
            tuple: (list of player rows, count of eligible players)
        """
        limit = self.effective_limit(limit)

        heap = MinHeap(key=lambda entry: entry['heap_rating'])
        eligible = 0
        for player_id, player_data in (players_data or {}).items():
            # Unrated players and ratings that do not parse are left out
            if not player_data or not as_number(player_data.get('avg_rating')):
                continue
            entry = self.to_leaderboard_entry(player_id, player_data)
            entry['heap_rating'] = -entry['rating']
            heap.insert(entry)
            eligible += 1

        top_players = []
        for _ in range(min(heap.size(), limit)):
            entry = heap.extract_min()
            entry['rating'] = -entry.pop('heap_rating')
            top_players.append(entry)

        field = SORT_FIELDS.get(sort_by, 'rating')
        top_players.sort(key=lambda p: p[field], reverse=True)
        return top_players, eligible

    def get_leaderboard(self, limit=None, sort_by='rating'):
        """Read all players from the database and rank them."""
        players_data = rtdb.ref('players').once()
        return self.build_leaderboard(players_data, limit, sort_by)

    def update_rating(self, player_id, new_rating, match_result=None):
        """
        Record a finished match for a player.

        Args:
            player_id (str): Player key
            new_rating (int|float): Display rating (100x the stored decimal)
            match_result (str): 'win', 'loss' or anything else for neither

        Returns:
            tuple: (updates dict or None, error message or None)
        """
        player_ref = rtdb.ref('players').child(player_id)
        player_data = player_ref.once()
        if not player_data:
            return None, 'Player not found'

        updates = {
            'avg_rating': new_rating / 100,
            'matches_played': as_number(player_data.get('matches_played')) + 1,
            'last_updated': datetime.now(pytz.UTC).isoformat(),
        }
        if match_result == 'win':
            updates['wins'] = as_number(player_data.get('wins')) + 1
        elif match_result == 'loss':
            updates['losses'] = as_number(player_data.get('losses')) + 1

        player_ref.update(updates)
        logging.info(f"Leaderboard: rating of {player_id} set to {new_rating}")
        return updates, None


class PlayerSearchEngine:
    """
    Username search backed by the custom Trie

    Usernames are the local part of each user's email address.
    """

    @staticmethod
    def username_for(email):
        """'alice@example.com' -> 'alice'"""
        return email.split('@')[0]

    def search_users(self, users_data, prefix):
        """
        Find users whose username starts with prefix.

        Algorithm:
        1. Derive a username for every user that has an email
        2. Insert every username into a fresh Trie
        3. Trie prefix search, then keep users whose username matched

        Args:
            users_data (dict): uid -> stored user profile
            prefix (str): Case-sensitive username prefix

        Returns:
            list: Matching user rows, in storage order
        """
        trie = Trie()
        players = []
        for uid, user in (users_data or {}).items():
            if not user or not user.get('email'):
                continue
            username = self.username_for(user['email'])
            trie.insert(username)
            players.append({
                'uid': uid,
                'email': user['email'],
                'username': username,
                'role': user.get('role') or 'unknown',
                'fullName': user.get('fullName') or '',
            })

        matching = set(trie.search(prefix))
        return [player for player in players if player['username'] in matching]

    def search(self, prefix):
        """Search the users stored in the database."""
        return self.search_users(rtdb.ref('users').once(), prefix)


class MatchGraphManager:
    """
    Match history as an undirected graph: one vertex per team, one edge
    per match between its two sides. Answers "who has this team played"
    and "which teams are connected to it through any chain of matches".
    """

    @staticmethod
    def build_graph(matches_data):
        """Build a Graph from match documents carrying team1 and team2."""
        graph = Graph()
        for match in (matches_data or {}).values():
            if not match:
                continue
            team1, team2 = match.get('team1'), match.get('team2')
            if not team1 or not team2:
                continue
            graph.add_edge_auto(team1, team2)
        return graph

    def opponents_of(self, matches_data, team):
        """
        Direct opponents and BFS reachability for a team.

        Raises:
            UnknownVertexError: team does not appear in any match
        """
        graph = self.build_graph(matches_data)
        opponents = list(dict.fromkeys(graph.neighbors(team)))
        return {
            'team': team,
            'opponents': opponents,
            'reachable': graph.bfs(team),
        }

    def get_opponents(self, team):
        return self.opponents_of(rtdb.ref('Match').once(), team)


class RecordManager:
    """
    CRUD for the document collections (teams, players, matches).
    Each collection has one mandatory field that must be non-empty.
    """

    COLLECTIONS = {
        'team': ('Team', 'name'),
        'player': ('players', 'username'),
        'match': ('Match', 'tournament_id'),
    }

    def create(self, kind, payload):
        """
        Validate and store a document.

        Returns:
            tuple: (new key or None, error message or None)
        """
        path, required = self.COLLECTIONS[kind]
        if not payload or not isinstance(payload, dict) or not payload.get(required):
            return None, f'{kind} payload missing or {required} empty'
        return rtdb.ref(path).push(payload), None

    def list_all(self, kind):
        path, _ = self.COLLECTIONS[kind]
        return rtdb.ref(path).once()

    def delete(self, kind, key):
        path, _ = self.COLLECTIONS[kind]
        rtdb.ref(path).child(key).remove()


class UserManager:
    """
    User profile storage (the 'users' collection).
    Identity verification happens upstream; uid is trusted here.
    """

    OPTIONAL_FIELDS = ('fullName', 'displayName', 'phone')

    def sync_profile(self, uid, data):
        """
        Create or refresh a user profile.

        Returns:
            tuple: (role or None, error message or None)
        """
        data = data or {}
        role = data.get('role')
        if not role:
            return None, 'Role is required'

        updates = {
            'email': data.get('email'),
            'role': role,
            'score': 0,
            'createdAt': server_timestamp(),
        }
        for field in self.OPTIONAL_FIELDS:
            if data.get(field):
                updates[field] = data[field]

        rtdb.ref('users').child(uid).update(updates)
        return role, None

    def get_profile(self, uid):
        """Return the stored profile, or None."""
        return rtdb.ref('users').child(uid).once()


class ReportManager:
    """Fixed sample rows for the reports page."""

    SAMPLE_DATA = {
        'player': [
            {'id': 1, 'username': 'PlayerOne', 'matches': 20, 'wins': 15, 'winRate': 75},
            {'id': 2, 'username': 'PlayerTwo', 'matches': 25, 'wins': 10, 'winRate': 40},
            {'id': 3, 'username': 'PlayerThree', 'matches': 30, 'wins': 25, 'winRate': 83},
        ],
        'tournament': [
            {'id': 1, 'name': 'Summer Showdown', 'game': 'Valorant', 'status': 'Completed'},
            {'id': 2, 'name': 'Winter Classic', 'game': 'League of Legends', 'status': 'Upcoming'},
        ],
        'match': [
            {'id': 1, 'tournament': 'Summer Showdown', 'teams': 'Team A vs Team B',
             'status': 'Completed', 'result': 'Team A Win'},
            {'id': 2, 'tournament': 'Winter Classic', 'teams': 'Team C vs Team D',
             'status': 'Scheduled', 'result': 'Pending'},
        ],
    }

    def get_report(self, report_type):
        return [dict(row) for row in self.SAMPLE_DATA.get(report_type, [])]


# Singleton instances
leaderboard_manager = LeaderboardManager()
search_engine = PlayerSearchEngine()
match_graph_manager = MatchGraphManager()
record_manager = RecordManager()
user_manager = UserManager()
report_manager = ReportManager()
