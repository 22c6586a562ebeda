import logging
import logging.handlers
'''
Example for usage of logger.*
from logging_config import setup_logging

logger = setup_logging()
logger.info('Path will remain in bounds.')
logger.debug('Parsed command M:0,5,0,5;S:0,0;[N2].')
logger.error('Invalid map format.')
'''

def setup_logging(log_file='robo_grid.log', quiet: bool = False, debug: bool = False):
    logger = logging.getLogger('robo_grid')

    if logger.handlers:
        if quiet:
            logger.handlers = [h for h in logger.handlers
                               if not isinstance(h, logging.StreamHandler)
                               or isinstance(h, logging.FileHandler)]
        return logger

    logger.setLevel(logging.DEBUG)

    # Log format
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # File handler
    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(log_file,
                                                            maxBytes=5_000_000,
                                                            backupCount=0)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
