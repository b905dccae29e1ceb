import logging

LOGGER = logging.getLogger(__name__)

__all__ = [
    "initial_config",
    "setup_logging",
    "DEBUGV",
]


## sample layout: a loop at A (NORMAL/REVERSE), a line through B, a siding at C
initial_config = {
    "sections": [
        (10, ("A", "FACING"), ("B", "FACING")),
        (20, ("B", "NORMAL"), ("C", "FACING")),
        (30, ("C", "NORMAL"), ("D", "FACING")),
        (40, ("A", "NORMAL"), ("A", "REVERSE")),
        (15, ("C", "REVERSE"), ("E", "FACING")),
    ]
}


DEBUGV = 9
def debugv(self, message, *args, **kws):
    # Logger._log takes the positional args as a tuple
    if self.isEnabledFor(DEBUGV):
        self._log(DEBUGV, message, args, **kws)


def setup_logging(level=logging.INFO):
    """Configure the root logger. Only call this at the entry point of the application.

    :param level: The level of the root logger. Defaults to INFO.
    """
    logging.addLevelName(DEBUGV, "DEBUGV")
    logging.Logger.debugv = debugv
    formatter = logging.Formatter(fmt='%(lineno)d %(asctime)s %(levelname)s@%(name)s: %(message)s', datefmt='%H:%M:%S')
    handler = logging.StreamHandler()
    handler.setLevel(DEBUGV)
    handler.setFormatter(formatter)

    logging.root.setLevel(level)
    if not any(getattr(h, "railtopo", False) for h in logging.root.handlers):
        handler.railtopo = True
        logging.root.addHandler(handler)
