import sys
import traceback


def stacktrace():
    exc_info = sys.exc_info()
    trace = traceback.format_exception(*exc_info)
    return "".join(trace)


def error_dict(ex: BaseException) -> dict:
    return {
        "err_type": type(ex).__name__,
        "err_msg": str(ex),
    }
