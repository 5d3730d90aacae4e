import functools
import logging
import sys

from substrate_decoder.errors import UsageError


def guarded_command(function):
    """
    Decorator of functions that implement CLI commands.

    Usage errors (unknown storage names and the like) are reported on stderr as
    a single line. Anything else raised by the node or the decoder is logged with
    its traceback. Either way the shell gets a non-zero return code.

    :param function:  function to be decorated
    :return:
    """

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        try:
            rc = function(*args, **kwargs)
            # Generally the CLI commands are assumed to succeed if they don't throw,
            # but they can also return a positive error code if they need to.
            if rc is not None:
                return rc
            return 0
        except UsageError as e:
            print(str(e), file=sys.stderr)
            return 1
        except Exception as e:
            logging.exception(f"{function.__module__} failed: {e}")
            return 1

    return wrapper
