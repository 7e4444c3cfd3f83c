from .error import stacktrace, error_dict
from .errors import InvalidArgumentError
from .logger import log, get_error_info
