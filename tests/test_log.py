import io

import pytest

from obtree import log


def make_logger(level=log.LOG_WARN):
    return log.Logger(loglevel=level, logfile=io.StringIO(), colors='never')


def test_levels():
    logger = make_logger()
    logger.do_log(log.LOG_WARN, "warning: ", "a")
    logger.do_log(log.LOG_INFO, "b")
    logger.do_log(log.LOG_DEBUG3, "c")
    assert logger.file.getvalue() == "warning: a\n"


def test_fatal_always_written():
    logger = make_logger(log.LOG_FATAL)
    logger.do_log(log.LOG_ERROR, "hidden")
    logger.do_log(log.LOG_FATAL, "shown")
    assert logger.file.getvalue() == "shown\n"


def test_colors():
    logger = make_logger()
    logger.set_colors('always')
    logger.do_log(log.LOG_WARN, "w")
    logger.do_log(log.LOG_INFO, "i")
    logger.do_log(log.LOG_ERROR, "e")
    assert logger.file.getvalue() == (
        "\033[1;33mw\033[0m\ni\n\033[1;31me\033[0m\n")


def test_invalid_color_preference():
    with pytest.raises(ValueError):
        make_logger().set_colors('sometimes')


def test_tree_debug_messages(monkeypatch):
    from obtree.tree.bstree import BSTree

    logger = make_logger(log.LOG_DEBUG3)
    monkeypatch.setattr(log, 'logger', logger)
    root = BSTree.from_sequence([2, 1])
    root.remove()
    assert logger.file.getvalue().splitlines() == [
        "inserted 1",
        "built tree from 2 values",
        "removed 1",
        "removed 2",
    ]


def test_fatal_exit(monkeypatch):
    logger = make_logger()
    monkeypatch.setattr(log, 'logger', logger)
    with pytest.raises(SystemExit) as excinfo:
        log.fatal_exit(2, "bad")
    assert excinfo.value.code == 2
    assert logger.file.getvalue().endswith(": fatal: bad\n")
