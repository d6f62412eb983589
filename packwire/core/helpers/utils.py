import functools
import importlib
import logging
import pkgutil
from collections.abc import Callable


LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s:%(funcName)s] : %(message)s'


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)

    # one line per request is only useful while debugging
    if logging.getLevelName(level) > logging.DEBUG:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def import_submodules(package: str) -> list[str]:
    py_package = importlib.import_module(package)
    names = []

    for module_info in pkgutil.iter_modules(py_package.__path__):
        name = f"{package}.{module_info.name}"
        importlib.import_module(name)
        names.append(name)

    return names


def scan(package: str):
    """
    Decorator importing every module of `package` before the decorated
    function runs, so handlers registered at import time are in place.
    """
    def decorator(func: Callable):

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            import_submodules(package)
            return func(*args, **kwargs)

        return wrapper

    return decorator
