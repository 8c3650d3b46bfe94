import logging

storage = logging.getLogger('leelo.storage')
operations = logging.getLogger('leelo.operations')
cli = logging.getLogger('leelo.cli')


def setup_logging(level: str = 'WARNING'):
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(message)s')
