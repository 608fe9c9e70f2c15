from kaige_ecs.entity import Entity
from kaige_ecs.event import (
    ArchetypeCreated,
    EntityInserted,
    EntityRemoved,
    EventSender,
    LayoutFilter,
    Subscriber,
    Subscribers,
)


def collector():
    received = []

    def callback(event):
        received.append(event)
        return True

    return received, EventSender(callback)


def test_events_compare_by_value():
    e = Entity(9)
    assert EntityInserted(e, 1) == EntityInserted(Entity(9), 1)
    assert EntityInserted(e, 1) != EntityRemoved(e, 1)
    assert ArchetypeCreated(3).archetype == 3


def test_layout_filter_default_matches_all():
    assert LayoutFilter().matches_layout(["a"]) is True
    assert LayoutFilter().matches_layout([]) is True


def test_layout_filter_predicate():
    flt = LayoutFilter(lambda comps: "pos" in comps)
    assert flt.matches_layout(["pos", "rot"]) is True
    assert flt.matches_layout(["rot"]) is False


def test_sender_liveness():
    assert EventSender(lambda ev: None).send(ArchetypeCreated(0)) is True
    assert EventSender(lambda ev: False).send(ArchetypeCreated(0)) is False


def test_subscriber_is_interested_and_send():
    received, sender = collector()
    sub = Subscriber(LayoutFilter(lambda c: "pos" in c), sender)
    assert sub.is_interested(["pos"])
    assert not sub.is_interested(["vel"])
    event = ArchetypeCreated(2)
    assert sub.send(event) is True
    assert received == [event]


def test_subscribers_broadcast():
    got_a, sender_a = collector()
    got_b, sender_b = collector()
    subs = Subscribers()
    subs.push(Subscriber(LayoutFilter(), sender_a))
    subs.push(Subscriber(LayoutFilter(), sender_b))
    event = EntityRemoved(Entity(4), 0)
    subs.send(event)
    assert got_a == [event]
    assert got_b == [event]
    assert len(subs) == 2


def test_subscribers_drop_dead_senders():
    got, live = collector()
    dead = EventSender(lambda ev: False)
    subs = Subscribers()
    subs.push(Subscriber(LayoutFilter(), dead))
    subs.push(Subscriber(LayoutFilter(), live))
    subs.push(Subscriber(LayoutFilter(), dead))
    subs.send(ArchetypeCreated(1))
    assert len(subs) == 1
    assert got == [ArchetypeCreated(1)]
    subs.send(ArchetypeCreated(2))
    assert got == [ArchetypeCreated(1), ArchetypeCreated(2)]


def test_subscribers_matches_layout():
    _, sender = collector()
    pos_sub = Subscriber(LayoutFilter(lambda c: "pos" in c), sender)
    all_sub = Subscriber(LayoutFilter(), sender)
    subs = Subscribers([pos_sub, all_sub])
    assert list(subs.matches_layout(["pos"])) == [pos_sub, all_sub]
    assert list(subs.matches_layout(["rot"])) == [all_sub]
    assert len(subs) == 2
    assert repr(subs) == "Subscribers(len=2)"