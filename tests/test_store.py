from notipanel.notifications.seeds import DEMO_SEED
from notipanel.notifications.selectors import select_notifications, select_unread_count
from notipanel.notifications.store import NotificationStore, initialize, mark_as_read
from notipanel.notifications.actions import MarkAsRead
from notipanel.notifications.types import NotificationItem, NotificationsState


def test_initialize_keeps_seed_order():
    state = initialize(DEMO_SEED)
    assert state.ids() == ("abc123", "abc456", "abc789")
    assert initialize() == NotificationsState()


def test_demo_seed_scenario(demo_state):
    assert select_unread_count(demo_state) == 2

    after = mark_as_read(demo_state, "abc123")
    assert select_unread_count(after) == 1
    items = {item.id: item for item in select_notifications(after)}
    assert items["abc123"].read is True
    assert items["abc456"].read is True
    assert items["abc789"].read is False
    assert [i.text for i in select_notifications(after)] == [i.text for i in DEMO_SEED]

    unchanged = mark_as_read(after, "zzz")
    assert unchanged == after
    assert select_unread_count(unchanged) == 1


def test_empty_seed_scenario():
    state = initialize([])
    assert select_notifications(state) == ()
    assert select_unread_count(state) == 0
    assert mark_as_read(state, "abc123") == state


def test_mark_as_read_is_idempotent(demo_state):
    for item in DEMO_SEED:
        once = mark_as_read(demo_state, item.id)
        assert mark_as_read(once, item.id) == once


def test_unread_count_never_increases(demo_state):
    for target in ("abc123", "abc456", "abc789", "missing"):
        after = mark_as_read(demo_state, target)
        assert select_unread_count(after) <= select_unread_count(demo_state)


def test_exact_decrement_only_for_unread_items(demo_state):
    before = select_unread_count(demo_state)
    assert select_unread_count(mark_as_read(demo_state, "abc123")) == before - 1
    assert select_unread_count(mark_as_read(demo_state, "abc789")) == before - 1
    assert select_unread_count(mark_as_read(demo_state, "abc456")) == before
    assert select_unread_count(mark_as_read(demo_state, "nope")) == before


def test_order_preserved_and_only_target_changes(demo_state):
    after = mark_as_read(demo_state, "abc789")
    assert after.ids() == demo_state.ids()
    for old, new in zip(demo_state.items, after.items):
        if old.id == "abc789":
            assert (new.read, new.text) == (True, old.text)
        else:
            assert new == old


def test_previous_snapshot_is_not_modified(demo_state):
    mark_as_read(demo_state, "abc123")
    assert demo_state.items[0].read is False


def test_noop_returns_same_snapshot(demo_state):
    assert mark_as_read(demo_state, "unknown") is demo_state
    assert mark_as_read(demo_state, "abc456") is demo_state


def test_store_apply_replaces_snapshot():
    store = NotificationStore([NotificationItem("n1", "Hello")])
    first = store.state
    new_state = store.apply(MarkAsRead(id="n1"))
    assert store.state is new_state
    assert first.items[0].read is False
    assert new_state.items[0].read is True


def test_store_defaults_to_empty():
    store = NotificationStore()
    assert len(store.state) == 0
    assert store.apply(MarkAsRead(id="x")) is store.state
