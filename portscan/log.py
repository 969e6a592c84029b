import logging

LOGGER_NAME = "portscan"


def create_logger(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Replace rather than stack handlers when main() runs more than once
    for h in list(logger.handlers):
        logger.removeHandler(h)

    sh = logging.StreamHandler()  # stderr
    sh.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(sh)
    return logger
