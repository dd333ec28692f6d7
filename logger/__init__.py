import logging
import os
import sys


class CustomExtraLogAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        my_context = kwargs.pop("extra", self.extra["extra"])
        return "[%s] %s" % (my_context, msg), kwargs


def get_logger(name, level=None) -> logging.Logger:

    FORMAT = "[%(levelname)s  %(name)s %(module)s:%(lineno)s - %(funcName)s() - %(asctime)s]\n\t %(message)s \n"
    TIME_FORMAT = "%d.%m.%Y %I:%M:%S %p"
    FILENAME = os.getenv("LOG_FILE") or None

    if level is None:
        level = getattr(logging, os.getenv("LOG_LEVEL", "DEBUG").upper(), logging.DEBUG)

    if FILENAME:
        logging.basicConfig(
            format=FORMAT, datefmt=TIME_FORMAT, level=level, filename=FILENAME
        )
    else:
        logging.basicConfig(
            format=FORMAT, datefmt=TIME_FORMAT, level=level, stream=sys.stdout
        )

    logger_instance = logging.getLogger(name)

    # file logging is mirrored to stdout
    if FILENAME:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        logger_instance.addHandler(handler)

    logger_instance = CustomExtraLogAdapter(logger_instance, {"extra": None})

    return logger_instance


logger = get_logger(__name__)
