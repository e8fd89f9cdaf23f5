"""
Sample data for local development.

Seeds a handful of users, players, teams and matches so the dashboards,
the leaderboard and the search box have something to show on first run.
Nothing is written when the database already holds players.
"""

import logging

from models import Record
from realtime_db import rtdb, server_timestamp

SAMPLE_USERS = {
    'u-admin': {'email': 'admin@esports.local', 'role': 'admin', 'fullName': 'Site Admin'},
    'u-alice': {'email': 'alice@esports.local', 'role': 'player', 'fullName': 'Alice Moreau'},
    'u-alicia': {'email': 'alicia@esports.local', 'role': 'player', 'fullName': 'Alicia Chen'},
    'u-bob': {'email': 'bob@esports.local', 'role': 'manager', 'fullName': 'Bob Okafor'},
}

SAMPLE_PLAYERS = [
    {'username': 'alice', 'email': 'alice@esports.local', 'avg_rating': 18.4,
     'matches_played': 42, 'wins': 30, 'losses': 12, 'kills': 410, 'deaths': 220,
     'join_date': '2024-01-12', 'game': 'Valorant'},
    {'username': 'alicia', 'email': 'alicia@esports.local', 'avg_rating': 16.9,
     'matches_played': 35, 'wins': 21, 'losses': 14, 'kills': 388, 'deaths': 250,
     'join_date': '2024-02-03', 'game': 'Valorant'},
    {'username': 'bob', 'email': 'bob@esports.local', 'avg_rating': 12.2,
     'matches_played': 50, 'wins': 22, 'losses': 28, 'kills': 300, 'deaths': 310,
     'join_date': '2023-11-20'},
    {'username': 'rookie', 'email': 'rookie@esports.local'},
]

SAMPLE_TEAMS = [
    {'name': 'Night Owls', 'game': 'Valorant'},
    {'name': 'Iron Wolves', 'game': 'Valorant'},
    {'name': 'Red Comets', 'game': 'Dota 2'},
]

SAMPLE_MATCHES = [
    {'tournament_id': 'summer-showdown', 'team1': 'Night Owls', 'team2': 'Iron Wolves',
     'status': 'Completed', 'result': 'Night Owls Win'},
    {'tournament_id': 'winter-classic', 'team1': 'Iron Wolves', 'team2': 'Red Comets',
     'status': 'Scheduled', 'result': 'Pending'},
]


def seed_sample_data():
    """
    Insert the sample documents when no players exist yet.

    Returns:
        bool: True if data was written
    """
    if Record.query.filter_by(path='players').first() is not None:
        return False

    for uid, profile in SAMPLE_USERS.items():
        rtdb.ref('users').child(uid).set({**profile, 'score': 0, 'createdAt': server_timestamp()})
    for player in SAMPLE_PLAYERS:
        rtdb.ref('players').push(player)
    for team in SAMPLE_TEAMS:
        rtdb.ref('Team').push(team)
    for match in SAMPLE_MATCHES:
        rtdb.ref('Match').push(match)

    logging.info(
        f"Seeded {len(SAMPLE_USERS)} users, {len(SAMPLE_PLAYERS)} players, "
        f"{len(SAMPLE_TEAMS)} teams and {len(SAMPLE_MATCHES)} matches"
    )
    return True
