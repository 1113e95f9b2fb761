from vigilui.timed_labels import Notifications, TimedLabel, TimedLabelService


def _service(max_count=3, lifetime=2.0):
    return TimedLabelService(100.0, 50.0, max_count, lifetime, TimedLabel.CENTER)


def test_show_places_label_moved_up_once():
    service = _service()
    label = service.show("hi")
    assert label.text == "hi"
    assert label.alignment == TimedLabel.CENTER
    assert (label.x, label.y) == (
        100.0 + TimedLabelService.DELTA_X,
        50.0 + TimedLabelService.DELTA_Y,
    )
    assert service.labels == (label,)


def test_new_label_pushes_older_ones_up():
    service = _service()
    first = service.show("one")
    second = service.show("two")
    assert first.y - second.y == TimedLabelService.DELTA_Y
    assert first.x == second.x


def test_oldest_dropped_past_max_count():
    service = _service(max_count=2)
    shown = [service.show(str(i)) for i in range(5)]
    assert len(service.labels) == 3
    assert service.labels == tuple(shown[2:])
    assert shown[0] not in service.layer


def test_expired_label_fades_then_leaves():
    service = _service(lifetime=2.0)
    label = service.show("bye")
    service.update(1.0)
    assert not label.fading
    service.update(1.5)
    assert label.fading
    assert service.labels == ()
    assert service.layer == (label,)
    assert label.opacity == 1.0
    service.update(TimedLabelService.FADE_DURATION / 2)
    assert 0.0 < label.opacity < 1.0
    service.update(TimedLabelService.FADE_DURATION)
    assert service.layer == ()


def test_labels_with_identical_text_are_distinct():
    service = _service(lifetime=2.0)
    a = service.show("same")
    service.update(1.0)
    b = service.show("same")
    service.update(1.5)
    assert service.labels == (b,)
    assert a.fading and not b.fading


def test_notifications_defaults():
    notes = Notifications()
    label = notes.show("saved")
    assert label.alignment == (0, 1)
    assert label.lifetime == 5
    assert label.x == 10 + TimedLabelService.DELTA_X
    assert label.y == 25 + TimedLabelService.DELTA_Y
    assert notes.max_label_count == 10