# flake8: noqa
from .ports import displayable_ports, format_port_ranges, form_group, sort_ports
from .utils import (
    compare_version, version_lt, version_gte, parse_host, validate_host,
    host_from_env, parse_media_type, matches_content_type
)
