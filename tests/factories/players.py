"""
Player Factories

Factory functions for creating mock player payloads.
"""

from typing import Any, Dict, List


def create_mock_player(
    player_name: str = "Jayson Tatum",
    player_line_pts: float = 25.0,
    season_avg_pts: float = 23.0,
    is_home: bool = True,
    game_total_ou: float = 229.0,
    team_total_ou: float = 114.5,
    opp_pts_allowed_vs_pos: float = 23.0,
    recent_avg_pts: float = 23.0,
    season_avg_minutes: float = 34.0,
    expected_minutes: float = 34.0,
    matchup_pace: float = 99.5,
    is_back_to_back: bool = False,
    **kwargs
) -> Dict[str, Any]:
    """
    Create a mock player payload for testing.

    Defaults sit on the league baselines of the default profile, so every
    deviation-based multiplier is 1.0 and only home/away moves the result.

    Args:
        **kwargs: Additional fields to override

    Returns:
        Mock player payload dictionary
    """
    player = {
        "player_name": player_name,
        "player_line_pts": player_line_pts,
        "season_avg_pts": season_avg_pts,
        "is_home": is_home,
        "game_total_ou": game_total_ou,
        "team_total_ou": team_total_ou,
        "opp_pts_allowed_vs_pos": opp_pts_allowed_vs_pos,
        "recent_avg_pts": recent_avg_pts,
        "season_avg_minutes": season_avg_minutes,
        "expected_minutes": expected_minutes,
        "matchup_pace": matchup_pace,
        "is_back_to_back": is_back_to_back,
    }
    player.update(kwargs)
    return player


def create_neutral_player(**kwargs) -> Dict[str, Any]:
    """Create a payload with only the required fields (optional drivers omitted)."""
    player = {
        "player_name": "Jalen Brunson",
        "player_line_pts": 27.5,
        "season_avg_pts": 26.0,
        "is_home": False,
        "game_total_ou": 229.0,
        "team_total_ou": 114.5,
        "opp_pts_allowed_vs_pos": 23.0,
    }
    player.update(kwargs)
    return player


def create_mock_player_list(count: int = 3, **kwargs) -> List[Dict[str, Any]]:
    """
    Create a list of mock player payloads for testing.

    Args:
        count: Number of players to create
        **kwargs: Additional fields to override

    Returns:
        List of mock player payloads
    """
    roster = [
        ("Jayson Tatum", 27.5, 26.9),
        ("Luka Doncic", 33.5, 32.4),
        ("Nikola Jokic", 26.5, 26.4),
        ("Anthony Edwards", 25.5, 25.9),
        ("Devin Booker", 26.5, 27.1),
    ]

    players = []
    for name, line, season_avg in roster[:count]:
        players.append(create_mock_player(
            player_name=name,
            player_line_pts=line,
            season_avg_pts=season_avg,
            recent_avg_pts=season_avg,
            **kwargs
        ))
    return players
