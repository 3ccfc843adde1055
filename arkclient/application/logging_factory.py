import logging
import sys
from arkclient.application import settings


class LoggingFactory:  # pragma: no cover
    def __init__(self, loglevel=logging.DEBUG, logfile=None, stdout=False):
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        root = logging.getLogger()

        file_logger = logfile and logging.FileHandler(logfile)
        stdout_logger = stdout and logging.StreamHandler(sys.stdout)
        (file_logger or stdout_logger) and root.setLevel(level=loglevel)

        stdout_logger and stdout_logger.setLevel(loglevel)
        stdout_logger and stdout_logger.setFormatter(formatter)
        stdout_logger and root.addHandler(stdout_logger)

        file_logger and file_logger.setLevel(loglevel)
        file_logger and file_logger.setFormatter(formatter)
        file_logger and root.addHandler(file_logger)

    @property
    def root(self):
        return logging.getLogger('arkclient')

    @property
    def client(self):
        return logging.getLogger('arkclient.client')

    @property
    def resources(self):
        return logging.getLogger('arkclient.resources')


if settings.TESTING:
    Logger = LoggingFactory(
        logfile=None,
        loglevel=logging.DEBUG,
        stdout=True
    )  # type: LoggingFactory

elif settings.DEBUG:  # pragma: no cover
    logging.getLogger('arkclient').setLevel(logging.DEBUG)
    logging.getLogger('aiohttp.client').setLevel(logging.DEBUG)
    logging.getLogger('asyncio').setLevel(logging.INFO)
    Logger = LoggingFactory(
        loglevel=logging.DEBUG,
        stdout=True
    )  # type: LoggingFactory

else:  # pragma: no cover
    logging.getLogger('arkclient').addHandler(logging.NullHandler())
    Logger = LoggingFactory()  # type: LoggingFactory
