# flake8: noqa
from ._logging import LogLevel, logger
from ._metadata import version
from .colourspace import *
from .convert import *
from .exception import *
from .validation import *
