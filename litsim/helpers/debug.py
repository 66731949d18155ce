import functools
import logging


def log_call(fn):
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        logging.getLogger(fn.__module__).debug(
            "Calling %s (%d positional, keywords: %s)", fn.__qualname__, len(args), sorted(kwargs)
        )
        return fn(*args, **kwargs)
    return __wrapped
