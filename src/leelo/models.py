import enum
import typing as tp

from leelo import type_aliases as ta

INITIAL_RATING = 1000.0


class BaseError(Exception):
    pass


class TableError(BaseError):
    pass


class DuplicateIdentifier(TableError):
    pass


class UnknownIdentifier(TableError):
    pass


class InvalidIdentifier(TableError):
    pass


class MatchError(BaseError):
    pass


class MatchWithYourselfError(MatchError):
    pass


class ResultError(BaseError):
    pass


class InvalidOutcomeToken(ResultError):
    pass


class MatchOutcome(enum.Enum):
    WHITE_WINS = '1-0'
    BLACK_WINS = '0-1'
    DRAW = '0.5-0.5'

    @classmethod
    def from_token(cls, token: str) -> 'MatchOutcome':
        try:
            return cls(token)
        except ValueError as exc:
            allowed = ', '.join(an_outcome.value for an_outcome in cls)
            raise InvalidOutcomeToken(f'unable to interpret score {token!r}, expected one of {allowed}') from exc

    @property
    def white_score(self) -> float:
        return _SCORES[self][0]

    @property
    def black_score(self) -> float:
        return _SCORES[self][1]


_SCORES = {
    MatchOutcome.WHITE_WINS: (1.0, 0.0),
    MatchOutcome.BLACK_WINS: (0.0, 1.0),
    MatchOutcome.DRAW: (0.5, 0.5),
}


class RatingTable:
    def __init__(self, ratings: tp.Optional[tp.Dict[str, float]] = None) -> None:
        self._ratings = dict(ratings or {})

    def create_player(self, player_id: str) -> None:
        if not player_id:
            raise InvalidIdentifier('player id should be a non-empty string')
        try:
            player_id.encode('utf-8')
        except UnicodeEncodeError as exc:
            raise InvalidIdentifier(f'player id {player_id!r} is not valid utf-8 text') from exc
        if player_id in self._ratings:
            raise DuplicateIdentifier(f'player id {player_id!r} is already in use')
        self._ratings[player_id] = INITIAL_RATING

    def get_rating(self, player_id: str) -> float:
        try:
            return self._ratings[player_id]
        except KeyError:
            raise UnknownIdentifier(f'player {player_id!r} not found') from None

    def set_rating(self, player_id: str, rating: float) -> None:
        self._ratings[player_id] = rating

    def all_entries(self) -> ta.Entries:
        return list(self._ratings.items())

    def __contains__(self, player_id) -> bool:
        return player_id in self._ratings

    def __len__(self) -> int:
        return len(self._ratings)

    def __repr__(self):
        cls_name = self.__class__.__name__
        return f'{cls_name}({self._ratings!r})'
