import argparse
import sys

from leelo import cfg
from leelo import loggers
from leelo import models
from leelo import operations
from leelo import storage


def main(argv=None):
    args = _parse_args(argv)
    if args.make_operation is None:
        _exit_with_error('not enough arguments. Try leelo help.')
    try:
        config = cfg.get_config()
    except cfg.ConfigError as exc:
        _exit_with_error(str(exc))
    loggers.setup_logging(config.log_level)
    operation = args.make_operation(args)
    try:
        operations.run(operation, sys.stdout)
    except (models.BaseError, storage.BaseError) as exc:
        loggers.cli.info('%r failed', operation, exc_info=True)
        _exit_with_error(f'Application error: {exc}')


def _exit_with_error(message: str) -> None:
    print(message, file=sys.stderr)
    sys.exit(1)


def _parse_outcome(token: str) -> models.MatchOutcome:
    try:
        return models.MatchOutcome.from_token(token)
    except models.InvalidOutcomeToken as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog='leelo', description='A simple Elo rating implementation.')
    parser.set_defaults(make_operation=None)
    subparsers = parser.add_subparsers(title='commands')

    help_parser = subparsers.add_parser('help', aliases=['h'], help='print help information')
    help_parser.set_defaults(make_operation=lambda args: operations.ShowHelp())

    new_parser = subparsers.add_parser('new', aliases=['n'], help='create new leelo table')
    new_parser.add_argument('file')
    new_parser.set_defaults(make_operation=lambda args: operations.InitializeTable(args.file))

    player_parser = subparsers.add_parser('player', aliases=['p'], help='create new player')
    player_parser.add_argument('player_id')
    player_parser.add_argument('file')
    player_parser.set_defaults(make_operation=lambda args: operations.AddPlayer(args.file, args.player_id))

    game_parser = subparsers.add_parser(
        'game', aliases=['g'], help='record results of a game and update ratings')
    game_parser.add_argument('white')
    game_parser.add_argument('black')
    game_parser.add_argument('score', type=_parse_outcome, help='one of 1-0, 0-1, 0.5-0.5')
    game_parser.add_argument('file')
    game_parser.set_defaults(
        make_operation=lambda args: operations.RecordMatch(args.file, args.white, args.black, args.score))

    view_parser = subparsers.add_parser('view', aliases=['v'], help='view players and ratings')
    view_parser.add_argument('file')
    view_parser.set_defaults(make_operation=lambda args: operations.ListStandings(args.file))

    return parser.parse_args(argv)


if __name__ == '__main__':
    main()
