import logging
import os

import paramiko

from . import constants
from . import errors

log = logging.getLogger(__name__)


def default_trust_key_path(environment=None):
    """
    Location of the client trust key: ``$DOCKER_CONFIG/key.pem`` if
    ``DOCKER_CONFIG`` is set, ``~/.docker/key.pem`` otherwise.
    """
    if not environment:
        environment = os.environ
    config_dir = environment.get('DOCKER_CONFIG') or os.path.join(
        os.path.expanduser('~'), constants.DOCKER_CONFIG_DIRNAME
    )
    return os.path.join(config_dir, constants.TRUST_KEY_FILENAME)


def _generate_trust_key(path):
    try:
        key = paramiko.ECDSAKey.generate()
    except (ValueError, paramiko.SSHException) as e:
        raise errors.TrustKeyError(
            'Error generating key: {0}'.format(e), path
        ) from e
    try:
        key.write_private_key_file(path)
    except (IOError, paramiko.SSHException) as e:
        raise errors.TrustKeyError(
            'Error saving key file: {0}'.format(e), path
        ) from e
    log.info('Generated new trust key %s at %s', key.fingerprint, path)
    return key


def load_or_create_trust_key(path):
    """
    Load the ECDSA trust key stored at ``path``, generating and saving a
    new P-256 key if the file does not exist yet.

    The parent directory is created with ``0700`` permissions and a new key
    file is written with ``0600``. Concurrent calls for the same path are
    not coordinated.

    Args:
        path (str): Path of the PEM encoded private key.

    Returns:
        (:py:class:`paramiko.ECDSAKey`): The loaded or generated key.

    Raises:
        :py:class:`dockerports.errors.TrustKeyError`
            If the directory cannot be created, or the key cannot be
            loaded, generated or saved.
    """
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), 0o700,
                    exist_ok=True)
    except OSError as e:
        raise errors.TrustKeyError(
            'Error creating key directory: {0}'.format(e), path
        ) from e

    try:
        key = paramiko.ECDSAKey.from_private_key_file(path)
    except FileNotFoundError:
        return _generate_trust_key(path)
    except (IOError, paramiko.SSHException) as e:
        raise errors.TrustKeyError(
            'Error loading key file: {0}'.format(e), path
        ) from e

    log.debug('Loaded trust key %s from %s', key.fingerprint, path)
    return key
