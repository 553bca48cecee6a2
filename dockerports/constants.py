import sys

API_VERSION = '1.19'

# Host used when only a port is given to -H, e.g. -H tcp://:8080
DEFAULT_HTTP_HOST = '127.0.0.1'
DEFAULT_HTTP_PORT = 2375
# The daemon always listens on this socket unless told otherwise
DEFAULT_UNIX_SOCKET = '/var/run/docker.sock'

DOCKER_CONFIG_DIRNAME = '.docker'
TRUST_KEY_FILENAME = 'key.pem'

PORT_GROUP_SEPARATOR = '/'
PORT_TOKEN_SEPARATOR = ', '

IS_WINDOWS_PLATFORM = (sys.platform == 'win32')
