"""
Test Data Factories

This module provides factory functions for creating test data.
All test data should be created through these factories to ensure consistency.

Usage:
    from tests.factories import create_mock_player, create_mock_run_request

    player = create_mock_player(opp_pts_allowed_vs_pos=30.0)
    request = create_mock_run_request(players=[player])
"""

from .players import create_mock_player, create_mock_player_list, create_neutral_player
from .runs import create_mock_run_request

__all__ = [
    'create_mock_player',
    'create_mock_player_list',
    'create_neutral_player',
    'create_mock_run_request',
]
