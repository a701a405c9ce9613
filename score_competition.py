#!/usr/bin/env python3
"""
Golf Competition Scorer CLI

Scores a competition file and writes the individual and team leaderboards.

Usage:
    python score_competition.py --input data/competitions/club_champs.json
    python score_competition.py -i club_champs.json -o out/club_champs_results.json --series-teams 10
"""

import argparse
import logging
import sys
from pathlib import Path

from golfscore import save_leaderboard, score_competition_from_json
from golfscore.exceptions import ScoringError
from golfscore.logging_config import setup_logging


def format_to_par(relative_to_par: int) -> str:
    if relative_to_par == 0:
        return 'E'
    return f'+{relative_to_par}' if relative_to_par > 0 else str(relative_to_par)


def print_leaderboard(data: dict) -> None:
    """Print the individual and team standings."""
    print('\n' + '=' * 60)
    print(f"{data['competition']} ({data['format']}, {data['scoring_mode']})")
    print('=' * 60)

    for row in data['leaderboard']:
        if not row['is_valid_round']:
            score = '-'
        elif data['scoring_mode'] == 'net' and row['net_relative_to_par'] is not None:
            score = format_to_par(row['net_relative_to_par'])
        else:
            score = format_to_par(row['relative_to_par'])
        extra = ''
        if row.get('custom_display_data') and 'stableford_points' in row['custom_display_data']:
            extra = f"  {row['custom_display_data']['stableford_points']} pts"
        print(f"  {row['position']:>3}. {row['name']}: {score} (thru {row['holes_played']}){extra}")

    if data.get('teams'):
        print('\nTEAMS')
        for team in data['teams']:
            score = format_to_par(team['relative_to_par']) if team['has_results'] else '-'
            print(
                f"  {team['position']:>3}. {team['team_name']}: {score} "
                f"[{team['status']}] {team['ranking_points']} pts"
            )


def main():
    parser = argparse.ArgumentParser(description='Golf competition scorer')
    parser.add_argument(
        '--input', '-i',
        required=True,
        help='Path to the competition JSON file',
    )
    parser.add_argument(
        '--output', '-o',
        default=None,
        help='Output path for the leaderboard JSON (defaults to <input>_results.json)',
    )
    parser.add_argument(
        '--series-teams', '-t',
        type=int,
        default=None,
        help='Total teams in the series, for team points',
    )
    parser.add_argument(
        '--log-dir',
        default=None,
        help='Directory for log files (file logging is off when omitted)',
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug output, including the team ranking dump',
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Do not print the leaderboard',
    )

    args = parser.parse_args()

    logger = setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_to_file=args.log_dir is not None,
    )

    input_path = Path(args.input)
    if args.output:
        output_path = Path(args.output)
    else:
        output_path = input_path.with_name(f'{input_path.stem}_results.json')

    try:
        data = score_competition_from_json(input_path, args.series_teams)
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except ScoringError as e:
        logger.error(str(e))
        sys.exit(2)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    if not args.quiet:
        print_leaderboard(data)

    save_leaderboard(output_path, data)


if __name__ == '__main__':
    main()
