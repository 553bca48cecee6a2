import logging
import os
import unittest
from unittest import mock

import pytest
import requests

from dockerports.constants import API_VERSION, DEFAULT_UNIX_SOCKET
from dockerports.errors import DockerException, InvalidHost, InvalidVersion
from dockerports.utils import (
    compare_version, host_from_env, matches_content_type, parse_host,
    parse_media_type, validate_host, version_gte, version_lt
)


class ParseHostTest(unittest.TestCase):
    def test_parse_host(self):
        invalid_hosts = [
            '0.0.0.0',
            'tcp://',
            'udp://127.0.0.1',
            'udp://127.0.0.1:2375',
            'tcp://127.0.0.1',
            'tcp://127.0.0.1:',
            'tcp://127.0.0.1:port',
            'tcp://a:1:2',
            'tcp://tcp://127.0.0.1:2375',
            'unix://tcp://127.0.0.1',
            'tcp://netloc:3333/path?q=1',
            'tcp://netloc:3333/path#fragment',
            '[fd12::82d1]',
            '[fd12::82d1:2375',
            'ssh://user@remote',
        ]

        valid_hosts = {
            '0.0.0.1:5555': 'tcp://0.0.0.1:5555',
            ':6666': 'tcp://127.0.0.1:6666',
            'tcp://:7777': 'tcp://127.0.0.1:7777',
            'tcp://kokia.jp:2375': 'tcp://kokia.jp:2375',
            'unix:///var/run/docker.sock': 'unix:///var/run/docker.sock',
            'unix://': 'unix:///var/run/docker.sock',
            'unix:///tmp/other.sock': 'unix:///tmp/other.sock',
            '12.234.45.127:2375/docker/engine': (
                'tcp://12.234.45.127:2375/docker/engine'
            ),
            'somehost.net:80/service/swarm': (
                'tcp://somehost.net:80/service/swarm'
            ),
            'tcp://myhost.docker.net:2376/': 'tcp://myhost.docker.net:2376',
            '[fd12::82d1]:2375': 'tcp://[fd12::82d1]:2375',
            'tcp://[fd12:5672::12aa]:1090': 'tcp://[fd12:5672::12aa]:1090',
            'fd://': 'fd://',
            'fd://3': 'fd://3',
            '  tcp://host:2375  ': 'tcp://host:2375',
        }

        for host in invalid_hosts:
            with pytest.raises(InvalidHost):
                parse_host(host)

        for host, expected in valid_hosts.items():
            assert parse_host(host) == expected

    def test_parse_host_empty_value(self):
        for val in [None, '', '   ']:
            assert parse_host(val, is_win32=False) == (
                'unix:///var/run/docker.sock'
            )
            assert parse_host(val, is_win32=True) == 'tcp://127.0.0.1:2375'

    def test_parse_host_custom_defaults(self):
        assert parse_host(':2375', default_host='10.0.0.1') == (
            'tcp://10.0.0.1:2375'
        )
        assert parse_host('unix://', default_socket='/run/d.sock') == (
            'unix:///run/d.sock'
        )
        assert parse_host('', default_socket='/run/d.sock',
                          is_win32=False) == 'unix:///run/d.sock'

    def test_invalid_host_is_a_docker_exception(self):
        with pytest.raises(DockerException):
            validate_host('udp://127.0.0.1')
        with pytest.raises(ValueError):
            validate_host('udp://127.0.0.1')

    def test_error_message_names_the_address(self):
        with pytest.raises(InvalidHost) as excinfo:
            parse_host('udp://127.0.0.1')
        assert 'udp://127.0.0.1' in str(excinfo.value)

    def test_validate_host_alias(self):
        assert validate_host is parse_host


class HostFromEnvTest(unittest.TestCase):
    def test_host_from_env(self):
        env = {'DOCKER_HOST': 'tcp://192.168.59.103:2376'}
        assert host_from_env(env) == 'tcp://192.168.59.103:2376'

    def test_host_from_env_empty(self):
        env = {'DOCKER_HOST': '', 'DOCKER_CERT_PATH': ''}
        assert host_from_env(env) == 'unix://{0}'.format(DEFAULT_UNIX_SOCKET)

    def test_host_from_os_environ(self):
        with mock.patch.dict(os.environ, {'DOCKER_HOST': ':4243'}):
            assert host_from_env() == 'tcp://127.0.0.1:4243'

    def test_host_from_env_invalid(self):
        with pytest.raises(InvalidHost):
            host_from_env({'DOCKER_HOST': 'udp://127.0.0.1'})


class ParseMediaTypeTest(unittest.TestCase):
    def test_plain(self):
        assert parse_media_type('application/json') == (
            'application/json', {}
        )

    def test_lowercases_type(self):
        assert parse_media_type(' Application/JSON ') == (
            'application/json', {}
        )

    def test_parameters(self):
        assert parse_media_type(
            'text/plain; charset=UTF-8; Format="flowed \\"x\\""'
        ) == ('text/plain', {'charset': 'UTF-8', 'format': 'flowed "x"'})

    def test_trailing_semicolon(self):
        assert parse_media_type('text/plain;') == ('text/plain', {})

    def test_type_without_subtype(self):
        assert parse_media_type('form-data') == ('form-data', {})

    def test_invalid(self):
        for value in [
            None, '', '   ', '/json', 'application/', 'text/html/x',
            'text html', 'text/plain; charset', 'text/plain; =utf-8',
            'text/plain; charset="utf-8', 'text/plain; a=1 b',
            'text/plain; a=1; A=2',
        ]:
            with pytest.raises(ValueError):
                parse_media_type(value)


class MatchesContentTypeTest(unittest.TestCase):
    def test_matches(self):
        assert matches_content_type('application/json', 'application/json')

    def test_ignores_parameters(self):
        assert matches_content_type(
            'application/json; charset=utf-8', 'application/json'
        )

    def test_parsed_type_is_lowercased(self):
        assert matches_content_type('Application/Json', 'application/json')

    def test_expected_type_is_case_sensitive(self):
        assert not matches_content_type(
            'application/json', 'Application/JSON'
        )

    def test_mismatch(self):
        assert not matches_content_type('text/plain', 'application/json')

    def test_invalid_is_logged_and_false(self):
        logger = logging.getLogger('dockerports.utils.utils')
        with mock.patch.object(logger, 'error') as log_error:
            assert not matches_content_type('', 'application/json')
            assert not matches_content_type(None, 'application/json')
        assert log_error.call_count == 2

    def test_response(self):
        resp = requests.Response()
        resp.headers['Content-Type'] = 'application/x-tar; charset=binary'
        assert matches_content_type(resp, 'application/x-tar')
        assert not matches_content_type(resp, 'application/json')

    def test_response_without_header(self):
        resp = requests.Response()
        assert not matches_content_type(resp, 'application/json')


class VersionTest(unittest.TestCase):
    def test_compare_version(self):
        assert compare_version('1.9', '1.10') == 1
        assert compare_version('1.10', '1.9') == -1
        assert compare_version('1.19', '1.19') == 0

    def test_version_lt(self):
        assert version_lt('1.18', '1.19')
        assert not version_lt('1.19', '1.19')
        assert not version_lt('1.20', '1.19')

    def test_version_gte(self):
        assert version_gte('1.19', '1.19')
        assert version_gte('1.20', '1.19')
        assert not version_gte('1.9', '1.19')

    def test_invalid_version(self):
        with pytest.raises(InvalidVersion):
            compare_version('latest', '1.19')

    def test_api_version_is_comparable(self):
        assert version_gte(API_VERSION, '1.12')
        assert version_lt(API_VERSION, '1.20')
