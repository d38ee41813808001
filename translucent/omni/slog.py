# -------------------------------------------------------------------------- #
# ---------------------------------------------------------------- HEADER -- #
"""
@organization: Kludgeworks LLC

@description: SLOG, the simple logger, which everything in translucent
              reports through

@applications: all

Loggers are looked up by module name, so a module only needs
"logger = slog.Logger()" at the top to get one.  Handlers decide where
messages end up; the root logger writes them to stdout.

NOTE: Slog is built with the CPython implementation in mind, and may not
work for other interpreters.  This is due to slog's unique introspective
frame-lookup mechanism, which allows for automatic inheritance of loggers.
"""

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- IMPORTS -- #

# built-in
import threading
import sys
from itertools import chain
from contextlib import contextmanager

# internal
from translucent.omni.inspections import get_mod_trace

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- GLOBALS -- #

# ---------------------------------------------------------- Version Data -- #
VERSION = '3.3'
DEBUG_VERSION = '3.3.0'

# -------------------------------------------------- Handlers and Loggers -- #
# this is just a placeholder -- the actual root_logger will be
# set at the bottom of this module
root_logger = None

# ------------------------------------------------------------- Threading -- #
handler_lock = threading.RLock()
handler_ctx_lock = threading.Lock()
root_lock = threading.Lock()

# -------------------------------------------------------- Logging Levels -- #
# only handle exceptions
EXCEPTION = 0
# errors and exceptions only
ERROR = 1
# exceptions, errors and warnings only
WARNING = 2
# exceptions, errors, warnings, and info
INFO = 3
# exceptions, errors, warnings, info, and debugs
DEBUG = 4

# get the name of the level from the integer
LEVEL_LOOKUP = {0: 'EXCEPTION',
                1: 'ERROR',
                2: 'WARNING',
                3: 'INFO',
                4: 'DEBUG',
                }

# by default, only handle info, warnings, and errors
DEFAULT_VERBOSITY = 3

# -------------------------------------------------------------------------- #
# --------------------------------------------------------------- LOGGERS -- #

# ----------------------------------------------------------------- Cache -- #
_logger_cache = {}

# ----------------------------------------------------------- Metaclasses -- #
class LogLookup_Meta(type):
    """Implements the flyweight pattern for Loggers, keeping an instance
    dictionary in the Logger class for lookups.  This inherently makes
    Loggers into name-bound singletons."""
    def __call__(cls, *args, **kwargs):
        if not args:
            outer_frame = sys._getframe(1)
            mod_name = outer_frame.f_globals.get('__name__', '__main__')
            while mod_name == __name__ and outer_frame.f_back:
                outer_frame = outer_frame.f_back
                mod_name = outer_frame.f_globals.get('__name__', '__main__')
            args = (mod_name,)
        try:
            return _logger_cache[args[0]]
        except KeyError:
            return _logger_cache.setdefault(
                args[0], type.__call__(cls, *args, **kwargs))

# --------------------------------------------------------------- Classes -- #
class Logger(object, metaclass=LogLookup_Meta):
    """A Logger passes each message to its own Handlers and to the Handlers
    of every logger belonging to a module further up the call stack.

       LOGGING WITH A LOGGER:
    Every module of the translucent package keeps one at module level:

    # ------------------------ Example Code -------------------------- #
    logger = Logger()
    logger.debug("binding '{0}'", cls.__name__)
    # ---------------------------------------------------------------- #

       WATCHING THE BINDER:
    Binding reports at DEBUG, which the default verbosity hides.  Raise
    the level of the registry logger, or hang a handler on it:

    # ------------------------ Example Code -------------------------- #
    from translucent.omni.data_types import registry
    registry.logger.config(level=DEBUG)
    registry.logger.add_handler(CollectingHandler())
    # ---------------------------------------------------------------- #

       NESTED LOGGING:
    When a module of your own calls into translucent, the message logged
    by translucent also reaches the logger of your module, if it has one.
    """
    def __init__(self, name):
        # ------------------- DO NOT MODIFY FROM INSTANCE ------------------ #
        # please use add_handler and remove_handler methods to set the
        # handlers for the logger instance.
        self.name = name
        self.lookup = name
        self._handlers = dict()
        self.handlers = []

        # ------------------- Instance Modifications are Okay -------------- #
        # standalone Loggers do not call the loggers in their enclosing scopes
        self.standalone = False
        # the level determines which log messages trigger handlers
        self.level = DEFAULT_VERBOSITY
        # formatters determine how messages are processed before being passed
        # to handlers
        self.formatter = None

    # ----------------------------------------------------- Configuration -- #
    def config(self, level=DEFAULT_VERBOSITY, standalone=False,
               formatter=None):
        """set the instance attributes for the Logger instance after
        creation"""
        self.standalone = standalone
        self.level = level
        if formatter:
            self.formatter = formatter

    # ---------------------------------------------------------- Handlers -- #
    def add_handler(self, handler):
        """add a handler to the Logger instance"""
        self._handlers[id(handler)] = handler
        self.handlers = list(self._handlers.values())

    def remove_handler(self, handler):
        """remove a handler from the logger instance"""
        self._handlers.pop(id(handler))
        self.handlers = list(self._handlers.values())

    @contextmanager
    def use_handlers(self, handlers):
        """Temporarily replace the internal set of handlers for this
        logger with a different set, then return to the original handlers
        """
        with handler_ctx_lock:
            original_handlers = self.handlers
            self.handlers = list(handlers)
            try:
                yield
            finally:
                self.handlers = original_handlers

    # --------------------------------------------------------- Broadcast -- #
    def broadcast(self, message, *args, **kwargs):
        """Pass the message on to the handlers defined in this Logger,
        and all of the loggers from modules which enclose the calling
        function.
        """
        level = kwargs.pop('level')
        if args:
            message = message.format(*args)

        # ------------------- Handle Standalone Loggers -------------------- #
        if self.standalone:
            if level > self.level:
                return
            for handler in self.handlers:
                handler(message, level=level, **kwargs)
            return

        # ------------------- Get Enclosing Module Loggers ----------------- #
        # frame 0 is broadcast, frame 1 is info/debug/etc, frame 2 is the
        # calling function.
        frame = sys._getframe(2)
        supermodules = get_mod_trace(frame)
        supermodules.append('__main__')
        visited = set()
        supermodules = [sm for sm in supermodules
                        if not (sm in visited or visited.add(sm))]
        superloggers = [_logger_cache[sm] for sm in supermodules
                        if sm in _logger_cache]
        superloggers = [sl for sl in superloggers
                        if sl is self or not sl.standalone]
        if self not in superloggers:
            superloggers.insert(0, self)

        # ------------------- Logger Level Filter -------------------------- #
        if level > self.level:
            return

        if self.formatter:
            message = self.formatter(message, level, **kwargs)

        # ------------------- Broadcast ------------------------------------ #
        seen = set()
        for handler in chain.from_iterable(sl.handlers for sl in superloggers):
            if id(handler) in seen:
                continue
            seen.add(id(handler))
            handler(message, level=level, **kwargs)

    # --------------------------------------------------- Handle Messages -- #
    def exception(self, message, *args, **kwargs):
        """log exceptions which are expected to kill the application."""
        kwargs['exc_info'] = sys.exc_info()
        with handler_lock:
            self.broadcast(message, *args, level=EXCEPTION, **kwargs)

    def error(self, message, *args, **kwargs):
        """Indicates an error has definitely occurred, but not
        necessarily that the program will stop running.
        """
        with handler_lock:
            self.broadcast(message, *args, level=ERROR, **kwargs)

    def warning(self, message, *args, **kwargs):
        """log warnings that are useful to know, but won't completely
        stop an application from running
        """
        with handler_lock:
            self.broadcast(message, *args, level=WARNING, **kwargs)

    def info(self, message, *args, **kwargs):
        """log information useful to the user."""
        with handler_lock:
            self.broadcast(message, *args, level=INFO, **kwargs)

    def debug(self, message, *args, **kwargs):
        """log information useful to programmers for debugging"""
        with handler_lock:
            self.broadcast(message, *args, level=DEBUG, **kwargs)

    def __repr__(self):
        return "<slog.Logger for '{0}'>".format(self.lookup)

# -------------------------------------------------------------------------- #
# -------------------------------------------------------------- HANDLERS -- #
class Handler(object):
    """Callable class which allows object-orientation for logging
    handlers. Any callable which provides the same arg signature would
    work just as well, but this template allows for different methods
    for each level."""
    def __init__(self, level=None, formatter=None):
        super(Handler, self).__init__()
        self.formatter = formatter
        self.level = level if level is not None else 100
        self.verb_map = {4: self.handle_debug,
                         3: self.handle_info,
                         2: self.handle_warning,
                         1: self.handle_error,
                         0: self.handle_exception}

    def __call__(self, message, level=DEFAULT_VERBOSITY, **kwargs):
        """If the dispatch method (info, debug, etc.) is not explicitly
        overridden in the subclass or instance, then handle() is called
        instead."""
        if level > self.level:
            return
        level_method = self.verb_map[level]
        if self.formatter:
            message = self.formatter(message, level, **kwargs)
        level_method(message, level, **kwargs)

    def handle(self, message, level, **kwargs):
        """All handle methods default to this handler when called, unless
        explicitly overridden in a subclass
        """
        return

    def handle_debug(self, message, level, **kwargs):
        self.handle(message, level, **kwargs)

    def handle_info(self, message, level, **kwargs):
        self.handle(message, level, **kwargs)

    def handle_warning(self, message, level, **kwargs):
        self.handle(message, level, **kwargs)

    def handle_error(self, message, level, **kwargs):
        self.handle(message, level, **kwargs)

    def handle_exception(self, message, level, **kwargs):
        self.handle(message, level, **kwargs)

    def __repr__(self):
        return "<slog.Handler id {0}>".format(id(self))

# ------------------------------------------------------- Default Handler -- #
class BaseLogHandler(Handler):
    """HANDLER:
    use sys.stdout.write to output to the console
    """
    base_verbosity = DEBUG

    def __init__(self):
        super(BaseLogHandler, self).__init__(level=self.base_verbosity)

    def handle(self, message, level, **kwargs):
        sys.stdout.write('{}'.format(message))

class CollectingHandler(Handler):
    """HANDLER:
    keep (level, message) pairs in memory.  Handy for tests and for
    tools which want to show a summary after a batch of work."""
    def __init__(self, **kwargs):
        super(CollectingHandler, self).__init__(**kwargs)
        self.records = []

    def handle(self, message, level, **kwargs):
        self.records.append((level, message))

    def messages(self, level=None):
        return [msg for lvl, msg in self.records
                if level is None or lvl == level]

# -------------------------------------------------------------------------- #
# ------------------------------------------------------------ FORMATTERS -- #
# formatters are simple functions which take a message, level, and optional
# keyword arguments.  They transform the message either on the logger level or
# on the handler level.

def base_newline_formatter(msg, lvl, **kwargs):
    """return the message in the format:
    LEVELNAME: message\n
    (this formatter DOES append a newline)
    """
    return '{0}\n'.format(base_formatter(msg, lvl, **kwargs))

def base_formatter(msg, lvl, **kwargs):
    """return the message in the format:
    LEVELNAME: message
    (this formatter does NOT append a newline)
    """
    label = kwargs.get('label') or LEVEL_LOOKUP[lvl]
    if isinstance(msg, str) and "\n" in msg:
        spacer = '\n  {0}'.format(' ' * len(label))
        msg = spacer.join(msg.split('\n'))
    return "{0}: {1}".format(label, msg)

def context_formatter(ctx):
    def formatted_with_context(msg, _, **kwargs):
        return '{0} > {1}'.format(ctx, msg)
    return formatted_with_context

# -------------------------------------------------------------------------- #
# ------------------------------------------------------------- FUNCTIONS -- #

# ------------------------------------------------------ Context Managers -- #
@contextmanager
def alternate_root(logger):
    with root_lock:
        original_root = _logger_cache['__main__']
        _logger_cache['__main__'] = logger
        try:
            yield
        finally:
            _logger_cache['__main__'] = original_root

# --------------------------------------------------------- Log Functions -- #
def warning(message, *args, **kwargs):
    """log warnings that are useful to know, but won't completely stop
    an application from running"""
    root_logger.warning(message, *args, **kwargs)

# -------------------------------------------------------------------------- #
# ------------------------------------------------- Global Initialization -- #
# the root logger will always be called last in the stack.
root_logger = Logger('__main__')
base_log_handler = BaseLogHandler()
base_log_handler.formatter = base_newline_formatter
root_logger.add_handler(base_log_handler)
