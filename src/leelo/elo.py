import math
import typing as tp

from leelo import models

# rating difference of 200 gives a 75/25 expected score
RATING_CONST = 200 / math.log(3)
# max rating change from a single game, twice the change from an even game
K = 40


def expected_white_score(white_rating: float, black_rating: float) -> float:
    rating_diff = white_rating - black_rating
    return 1 / (1 + math.exp(-rating_diff / RATING_CONST))


def compute_updated_ratings(
        white_rating: float, black_rating: float,
        outcome: models.MatchOutcome) -> tp.Tuple[float, float]:
    expected_white = expected_white_score(white_rating, black_rating)
    expected_black = 1 - expected_white
    new_white_rating = white_rating + K * (outcome.white_score - expected_white)
    new_black_rating = black_rating + K * (outcome.black_score - expected_black)
    return new_white_rating, new_black_rating
