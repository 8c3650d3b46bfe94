import csv
import math
import os
import tempfile

import voluptuous as vol

from leelo import loggers
from leelo import models
from leelo import type_aliases as ta
from leelo import utils

HEADER = ['Player ID', 'Rating']
_NEW_FILE_MODE = 0o644


class BaseError(Exception):
    pass


class MalformedRecord(BaseError):
    pass


class SourceUnavailable(BaseError):
    pass


class DestinationUnwritable(BaseError):
    pass


def _finite(value: float) -> float:
    if not math.isfinite(value):
        raise vol.Invalid(f'rating should be a finite number, got {value}')
    return value


_ROW_SCHEMA = vol.Schema(
    vol.ExactSequence([
        vol.All(str, vol.Length(min=1, msg='player id should not be empty')),
        vol.All(str, vol.Strip, vol.Coerce(float, msg='rating should be a number'), _finite),
    ]))


@utils.log_time(loggers.storage, lambda path: repr(str(path)))
def load(path: ta.Path) -> models.RatingTable:
    try:
        with open(path, newline='', encoding='utf-8') as fileobj:
            return _read_table(csv.reader(fileobj), path)
    except OSError as exc:
        raise SourceUnavailable(f'unable to read {path}: {exc.strerror or exc}') from exc
    except (csv.Error, UnicodeDecodeError) as exc:
        raise MalformedRecord(f'{path} is not a valid rating table: {exc}') from exc


@utils.log_time(loggers.storage, lambda table, path: f'{len(table)} players, {str(path)!r}')
def save(table: models.RatingTable, path: ta.Path) -> None:
    # the table is replaced only once the whole file is written
    try:
        tmp_path = _write_tmp_file(table, path)
    except OSError as exc:
        raise DestinationUnwritable(f'unable to write {path}: {exc.strerror or exc}') from exc
    except UnicodeEncodeError as exc:
        raise DestinationUnwritable(f'unable to write {path}: {exc}') from exc
    try:
        os.replace(tmp_path, path)
    except OSError as exc:
        _remove_quietly(tmp_path)
        raise DestinationUnwritable(f'unable to write {path}: {exc.strerror or exc}') from exc
    loggers.storage.info('saved %d players to %s', len(table), path)


def _write_tmp_file(table: models.RatingTable, path: ta.Path) -> str:
    directory, name = os.path.split(os.path.abspath(path))
    fileobj = tempfile.NamedTemporaryFile(
        'w', newline='', encoding='utf-8', dir=directory, prefix=f'.{name}.', suffix='.tmp', delete=False)
    try:
        with fileobj:
            writer = csv.writer(fileobj)
            writer.writerow(HEADER)
            for player_id, rating in table.all_entries():
                writer.writerow([player_id, repr(float(rating))])
        os.chmod(fileobj.name, _get_file_mode(path))
    except BaseException:
        _remove_quietly(fileobj.name)
        raise
    return fileobj.name


def _get_file_mode(path: ta.Path) -> int:
    try:
        return os.stat(path).st_mode & 0o777
    except FileNotFoundError:
        return _NEW_FILE_MODE


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except OSError:
        loggers.storage.warning('unable to remove temporary file %s', path, exc_info=True)


def _read_table(reader, path) -> models.RatingTable:
    header = next(reader, None)
    if header is None or [a_field.strip() for a_field in header] != HEADER:
        raise MalformedRecord(f'{path}:{reader.line_num}: expected header {",".join(HEADER)!r}, got {header}')
    ratings = {}
    for row in reader:
        if not row:
            continue
        player_id, rating = _parse_row(row, path, reader.line_num)
        if player_id in ratings:
            raise MalformedRecord(f'{path}:{reader.line_num}: duplicate player id {player_id!r}')
        ratings[player_id] = rating
    loggers.storage.info('loaded %d players from %s', len(ratings), path)
    return models.RatingTable(ratings)


def _parse_row(row: ta.Row, path, line_num: int) -> ta.Entry:
    try:
        player_id, rating = _ROW_SCHEMA(row)
    except vol.Invalid as exc:
        raise MalformedRecord(f'{path}:{line_num}: bad record {row}: {exc}') from exc
    return player_id, rating
