# flake8: noqa
from .types import Port
from .utils import (
    displayable_ports, format_port_ranges, form_group, parse_host,
    validate_host, host_from_env, matches_content_type
)
from .trust import load_or_create_trust_key, default_trust_key_path
from .version import version, version_info
from .errors import *

__version__ = version
__title__ = 'dockerports'
