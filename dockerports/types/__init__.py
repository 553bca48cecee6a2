# flake8: noqa
from .ports import Port
