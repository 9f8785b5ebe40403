from tomb_crawler.colors import RED, WHITE
from tomb_crawler.messages import Message, MessageLog


def test_log_keeps_insertion_order():
    log = MessageLog()
    assert log.latest() is None
    log.add("one")
    log.add("two", RED)
    assert log.texts() == ["one", "two"]
    assert [m.text for m in log.newest_first()] == ["two", "one"]
    assert log.latest() == Message("two", RED)
    assert list(log)[0].color == WHITE
    assert len(log) == 2


def test_newest_first_is_a_copy():
    log = MessageLog()
    log.add("one")
    view = log.newest_first()
    view.clear()
    assert len(log) == 1
