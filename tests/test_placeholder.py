from longvinter.placeholder import DESTROY_DELAY, PlaceholderComponent


def test_add_items_and_event():
    holder = PlaceholderComponent()
    seen = []
    holder.items_changed.add(seen.append)
    holder.add_all_items([4, 5])
    holder.add_item(6)
    assert holder.items == [4, 5, 6]
    assert seen == [[4, 5], [4, 5, 6]]


def test_remove_not_empty_keeps_alive():
    holder = PlaceholderComponent()
    holder.add_all_items([1, 2])
    assert holder.remove_item(1) is True
    assert holder.items == [2]
    assert not holder.destroy_timer.is_valid()
    holder.timers.advance(DESTROY_DELAY * 2)
    assert holder.destroyed is False


def test_empty_destroys_after_delay():
    calls = []
    holder = PlaceholderComponent(on_destroy=lambda: calls.append(True))
    holder.add_item(7)
    holder.remove_item(7)
    assert holder.destroy_timer.is_valid()
    holder.timers.advance(DESTROY_DELAY / 2)
    assert calls == []
    holder.timers.advance(DESTROY_DELAY / 2)
    assert calls == [True]
    assert holder.destroyed is True
    assert not holder.destroy_timer.is_valid()


def test_timer_set_once():
    calls = []
    holder = PlaceholderComponent(on_destroy=lambda: calls.append(1))
    holder.add_item(7)
    holder.remove_item(7)
    holder.timers.advance(DESTROY_DELAY / 2)
    assert holder.remove_item(7) is False
    holder.timers.advance(DESTROY_DELAY / 2)
    assert calls == [1]