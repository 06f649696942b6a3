from types import SimpleNamespace

import pytest

from sdgengine.component import Component
from sdgengine.component_list import ComponentList


class Recorder(Component):
    def __init__(self, log, name="recorder", updatable=True, drawable=True):
        super().__init__(updatable, drawable)
        self.log = log
        self.name = name

    def init(self):
        self.log.append(("init", self.name))

    def update(self):
        self.log.append(("update", self.name))

    def post_update(self):
        self.log.append(("post_update", self.name))

    def draw(self):
        self.log.append(("draw", self.name))

    def close(self):
        self.log.append(("close", self.name))


class UpdateOnly(Recorder):
    def __init__(self, log):
        super().__init__(log, "update_only", True, False)


class DrawOnly(Recorder):
    def __init__(self, log):
        super().__init__(log, "draw_only", False, True)


def test_add_returns_attached_component():
    components = ComponentList()
    log = []
    comp = components.add(Recorder, log, name="a")
    assert comp.name == "a"
    assert comp.owner is components
    assert components.get(Recorder) is comp
    assert len(components) == 1


def test_add_same_type_twice_raises():
    components = ComponentList()
    components.add(Recorder, [])
    with pytest.raises(ValueError):
        components.add(Recorder, [])


def test_add_non_component_raises():
    with pytest.raises(TypeError):
        ComponentList().add(dict)


def test_add_to_uninitialized_entity_defers_init():
    log = []
    components = ComponentList(SimpleNamespace(initialized=False))
    comp = components.add(Recorder, log)
    assert log == []
    components.init_all()
    components.init_all()
    assert log == [("init", comp.name)]


def test_add_to_initialized_entity_inits_immediately():
    log = []
    components = ComponentList(SimpleNamespace(initialized=True))
    comp = components.add(Recorder, log)
    assert log == [("init", comp.name)]
    components.init_all()
    assert log == [("init", comp.name)]


def test_get_is_exact_and_get_typeof_accepts_subclasses():
    log = []
    components = ComponentList()
    comp = components.add(UpdateOnly, log)
    assert components.get(Recorder) is None
    assert components.get_typeof(Recorder) is comp
    assert components.has(UpdateOnly) is True
    assert components.has(DrawOnly) is False


def test_update_and_draw_respect_flags():
    log = []
    components = ComponentList()
    components.add(UpdateOnly, log)
    components.add(DrawOnly, log)
    components.update()
    components.post_update()
    components.draw()
    assert log == [
        ("update", "update_only"),
        ("post_update", "update_only"),
        ("draw", "draw_only"),
    ]


def test_remove_takes_effect_on_next_update():
    log = []
    components = ComponentList()
    components.add(UpdateOnly, log)
    keeper = components.add(DrawOnly, log)
    components.remove(UpdateOnly)
    assert components.has(UpdateOnly) is True
    components.update()
    assert components.has(UpdateOnly) is False
    assert ("close", "update_only") in log
    assert ("update", "update_only") not in log
    assert components.get(DrawOnly) is keeper
    assert len(components) == 1


def test_remove_missing_type_is_ignored():
    components = ComponentList()
    comp = components.add(Recorder, [])
    components.remove(DrawOnly)
    components.update()
    assert components.get(Recorder) is comp


def test_close_closes_everything():
    log = []
    components = ComponentList()
    components.add(UpdateOnly, log)
    components.add(DrawOnly, log)
    components.close()
    assert sorted(log) == [("close", "draw_only"), ("close", "update_only")]
    assert len(components) == 0
    components.update()
    components.draw()
    assert len(log) == 2