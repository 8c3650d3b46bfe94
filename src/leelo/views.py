import decimal

from leelo import models
from leelo import type_aliases as ta

USAGE = '''\
A simple Elo rating implementation.

USAGE:
    leelo [COMMAND] [ARGUMENTS]

COMMANDS:
    help
            Print help information
    new <file>
            Create new leelo table
    game <white> <black> <score> <file>
            Record results of a game and update ratings
            <score> is one of 1-0, 0-1, 0.5-0.5
    player <id> <file>
            Create new player
    view <file>
            View players and ratings
'''


def order_standings(entries: ta.Entries) -> ta.Entries:
    return sorted(entries, key=lambda entry: (-entry[1], entry[0]))


def format_standings(table: models.RatingTable) -> str:
    standings = order_standings(table.all_entries())
    if not standings:
        return ''
    width = max(len(player_id) for player_id, _ in standings)
    lines = [
        f'{player_id:<{width}}  {round_half_away(rating)}'
        for player_id, rating in standings
    ]
    return '\n'.join(lines) + '\n'


def round_half_away(rating: float) -> int:
    return int(decimal.Decimal(rating).quantize(decimal.Decimal(1), rounding=decimal.ROUND_HALF_UP))
