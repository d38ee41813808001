"""the slog logger which translucent reports through"""
from translucent.omni import slog


def make_logger(name):
    logger = slog.Logger(name)
    logger.config(standalone=True)
    handler = slog.CollectingHandler()
    logger.add_handler(handler)
    return logger, handler


def test_logger_is_named_after_its_module():
    assert slog.Logger().name == __name__


def test_loggers_are_flyweights():
    assert slog.Logger('slog.flyweight') is slog.Logger('slog.flyweight')


def test_level_filter():
    logger, handler = make_logger('slog.levels')
    logger.debug('hidden')
    logger.info('shown {0}', 1)
    logger.warning('careful')
    assert handler.messages() == ['shown 1', 'careful']
    assert handler.messages(slog.WARNING) == ['careful']


def test_config_level():
    logger, handler = make_logger('slog.verbose')
    logger.config(level=slog.DEBUG, standalone=True)
    logger.debug('now shown')
    assert handler.messages(slog.DEBUG) == ['now shown']


def test_remove_handler():
    logger, handler = make_logger('slog.removed')
    logger.remove_handler(handler)
    logger.error('nobody hears this')
    assert handler.records == []


def test_use_handlers():
    logger, handler = make_logger('slog.swapped')
    other = slog.CollectingHandler()
    with logger.use_handlers([other]):
        logger.info('elsewhere')
    logger.info('back')
    assert other.messages() == ['elsewhere']
    assert handler.messages() == ['back']


def test_base_formatter():
    assert slog.base_formatter('done', slog.INFO) == 'INFO: done'
    assert slog.base_formatter('a\nb', slog.INFO) == 'INFO: a\n      b'
    assert slog.base_newline_formatter('x', slog.ERROR) == 'ERROR: x\n'


def test_context_formatter():
    formatter = slog.context_formatter('bind')
    assert formatter('done', slog.INFO) == 'bind > done'


def test_root_logger_prints(capsys):
    slog.warning('careful')
    assert capsys.readouterr().out == 'WARNING: careful\n'


def test_alternate_root():
    logger, handler = make_logger('slog.alternate')
    logger.config(standalone=False)
    with slog.alternate_root(logger):
        slog.Logger('slog.inner').info('routed')
    assert handler.messages() == ['routed']


def test_handler_level():
    logger, _ = make_logger('slog.handler_level')
    quiet = slog.CollectingHandler(level=slog.WARNING)
    logger.add_handler(quiet)
    logger.info('chatter')
    logger.error('broken')
    assert quiet.records == [(slog.ERROR, 'broken')]
