import os
from pathlib import Path

from arkclient import __version__

TESTING = os.getenv('TESTING')
DEBUG = bool(os.getenv('ARKCLIENT_DEBUG'))

# explorer
DEFAULT_BASE_URL = 'https://dexplorer.ark.io:8443/api/'
API_VERSIONS = (1, 2)

# http
USER_AGENT = 'arkclient/%s' % __version__
CONTENT_TYPE = 'application/json'
API_VERSION_HEADER = 'API-Version'
CHUNK_SIZE = 64 * 1024

# files
FILE_DIRECTORY = '%s/.arkclient' % Path.home()
CONFIG_FILENAME = 'arkclient.conf'
