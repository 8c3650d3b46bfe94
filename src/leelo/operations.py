import typing as tp

from leelo import elo
from leelo import loggers
from leelo import models
from leelo import storage
from leelo import type_aliases as ta
from leelo import views


class BaseOperation:
    pass


class ShowHelp(BaseOperation):
    def __repr__(self):
        return f'{self.__class__.__name__}()'


class InitializeTable(BaseOperation):
    def __init__(self, path: ta.Path) -> None:
        self.path = path

    def __repr__(self):
        return f'{self.__class__.__name__}({self.path!r})'


class AddPlayer(BaseOperation):
    def __init__(self, path: ta.Path, player_id: str) -> None:
        self.path = path
        self.player_id = player_id

    def __repr__(self):
        return f'{self.__class__.__name__}({self.path!r}, {self.player_id!r})'


class RecordMatch(BaseOperation):
    def __init__(self, path: ta.Path, white_id: str, black_id: str, outcome: models.MatchOutcome) -> None:
        self.path = path
        self.white_id = white_id
        self.black_id = black_id
        self.outcome = outcome

    def __repr__(self):
        cls_name = self.__class__.__name__
        return f'{cls_name}({self.path!r}, {self.white_id!r}, {self.black_id!r}, {self.outcome})'


class ListStandings(BaseOperation):
    def __init__(self, path: ta.Path) -> None:
        self.path = path

    def __repr__(self):
        return f'{self.__class__.__name__}({self.path!r})'


def run(operation: BaseOperation, out: tp.TextIO) -> None:
    loggers.operations.info('running %r', operation)
    if isinstance(operation, ShowHelp):
        out.write(views.USAGE)
    elif isinstance(operation, InitializeTable):
        storage.save(models.RatingTable(), operation.path)
    elif isinstance(operation, AddPlayer):
        table = storage.load(operation.path)
        table.create_player(operation.player_id)
        storage.save(table, operation.path)
    elif isinstance(operation, RecordMatch):
        table = storage.load(operation.path)
        record_match(table, operation.white_id, operation.black_id, operation.outcome)
        storage.save(table, operation.path)
    elif isinstance(operation, ListStandings):
        table = storage.load(operation.path)
        out.write(views.format_standings(table))
    else:
        raise TypeError(f'unknown operation {operation!r}')


def record_match(
        table: models.RatingTable, white_id: str, black_id: str,
        outcome: models.MatchOutcome) -> None:
    if white_id == black_id:
        raise models.MatchWithYourselfError(f'player {white_id!r} cannot play against themselves')
    white_rating = _get_rating(table, white_id, 'white')
    black_rating = _get_rating(table, black_id, 'black')
    new_white_rating, new_black_rating = elo.compute_updated_ratings(white_rating, black_rating, outcome)
    loggers.operations.info(
        'before: white %s is %.2f; black %s is %.2f', white_id, white_rating, black_id, black_rating)
    table.set_rating(white_id, new_white_rating)
    table.set_rating(black_id, new_black_rating)
    loggers.operations.info(
        'after: white %s is %.2f; black %s is %.2f', white_id, new_white_rating, black_id, new_black_rating)


def _get_rating(table: models.RatingTable, player_id: str, side: str) -> float:
    try:
        return table.get_rating(player_id)
    except models.UnknownIdentifier as exc:
        raise models.UnknownIdentifier(f'{side} player {player_id!r} not found') from exc
