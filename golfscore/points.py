"""Points formulas for team series and individual competitions."""


def team_ranking_points(rank: int, total_teams: int) -> int:
    """
    Series points for a team that has results.

    Scoring:
        - 1st: total_teams + 2
        - 2nd: 1st - 2
        - 3rd: 2nd - 2
        - 4th and below: previous position - 1
        - Never below 1

    Args:
        rank: Position among teams with results (1-based)
        total_teams: Teams in the series, or teams with results when unknown

    Returns:
        Points awarded, 0 for a rank below 1 or an empty series
    """
    if rank < 1 or total_teams <= 0:
        return 0

    first_place = total_teams + 2
    if rank <= 3:
        points = first_place - 2 * (rank - 1)
    else:
        third_place = first_place - 4
        points = third_place - (rank - 3)

    return max(1, points)


def calculate_default_points(position: int, number_of_participants: int, multiplier: float = 1) -> float:
    """
    Competition points for an individual finishing position.

    Scoring:
        - 1st: participants + 2
        - 2nd: participants
        - 3rd and below: participants - (position - 1), minimum 0

    Args:
        position: Finishing position (1-based)
        number_of_participants: Players in the competition
        multiplier: Competition weighting (default: 1)
    """
    if position <= 0:
        return 0

    if position == 1:
        base_points = number_of_participants + 2
    elif position == 2:
        base_points = number_of_participants
    else:
        base_points = max(0, number_of_participants - (position - 1))

    return base_points * multiplier
