import threading

import pytest

from mailroom.support.container import (
    BindingResolutionError,
    CircularDependencyError,
    Container,
    TypeRegistry,
)


class Widget:
    pass


class Gadget:
    pass


def test_instance_is_returned_verbatim():
    container = Container()
    widget = Widget()
    assert container.instance("widget", widget) is widget
    assert container.resolve("widget") is widget
    assert container.bound("widget")


def test_bind_non_callable_is_stored_as_instance():
    container = Container()
    container.bind("greeting", "hello")
    assert container.resolve("greeting") == "hello"


def test_bind_class_builds_fresh_each_time():
    container = Container()
    container.bind("widget", Widget)
    first = container.resolve("widget")
    assert isinstance(first, Widget)
    assert container.resolve("widget") is not first


def test_bind_callable_receives_container():
    container = Container()
    container.instance("name", "gizmo")
    container.bind("label", lambda c: f"label:{c.resolve('name')}")
    assert container.resolve("label") == "label:gizmo"


def test_zero_argument_callable_is_called_bare():
    container = Container()
    container.bind("answer", lambda: 42)
    assert container.resolve("answer") == 42


def test_singleton_builds_once():
    container = Container()
    calls = []

    def build():
        calls.append(1)
        return Widget()

    container.singleton("widget", build)
    assert container.resolve("widget") is container.resolve("widget")
    assert calls == [1]


def test_singleton_is_built_once_across_threads():
    container = Container()
    calls = []
    barrier = threading.Barrier(8)

    def build():
        calls.append(1)
        return Widget()

    container.singleton("widget", build)
    results = []

    def worker():
        barrier.wait()
        results.append(container.resolve("widget"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert all(r is results[0] for r in results)


def test_rebinding_replaces_previous_entry():
    container = Container()
    container.instance("thing", Widget())
    container.bind("thing", Gadget)
    assert isinstance(container.resolve("thing"), Gadget)


def test_unknown_abstract_raises_with_name():
    container = Container()
    with pytest.raises(BindingResolutionError) as excinfo:
        container.resolve("does.not.Exist")
    assert excinfo.value.abstract == "does.not.Exist"
    assert "does.not.Exist" in str(excinfo.value)
    assert isinstance(excinfo.value, LookupError)


def test_registry_fallback_instantiates_fresh():
    registry = TypeRegistry()
    registry.register("Things.Widget", Widget)
    container = Container(registry=registry)

    first = container.resolve("Things.Widget")
    assert isinstance(first, Widget)
    assert container.resolve("Things.Widget") is not first
    assert container.has("Things.Widget")
    assert not container.bound("Things.Widget")


def test_binding_takes_precedence_over_registry():
    registry = TypeRegistry()
    registry.register("Things.Widget", Widget)
    container = Container(registry=registry)
    gadget = Gadget()
    container.instance("Things.Widget", gadget)
    assert container.resolve("Things.Widget") is gadget


def test_bind_none_defers_to_registry_and_can_be_shared():
    registry = TypeRegistry()
    registry.register("Things.Widget", Widget)
    container = Container(registry=registry)
    container.singleton("Things.Widget")
    assert container.resolve("Things.Widget") is container.resolve("Things.Widget")


def test_bind_none_without_registry_type_raises():
    container = Container(registry=TypeRegistry())
    container.bind("Things.Missing")
    with pytest.raises(BindingResolutionError):
        container.resolve("Things.Missing")


def test_circular_dependency_is_detected():
    container = Container()
    container.bind("a", lambda c: c.resolve("b"))
    container.bind("b", lambda c: c.resolve("a"))
    with pytest.raises(CircularDependencyError) as excinfo:
        container.resolve("a")
    assert excinfo.value.chain == ["a", "b", "a"]

    # The resolution stack is unwound after the failure.
    container.bind("b", Widget)
    assert isinstance(container.resolve("a"), Widget)


def test_forget_and_flush():
    container = Container()
    container.instance("one", 1)
    container.bind("two", lambda: 2)
    container.forget("one")
    assert not container.bound("one")
    assert list(container) == ["two"]
    container.flush()
    assert list(container) == []


def test_registry_basics():
    registry = TypeRegistry()
    registry.register("B.Gadget", Gadget)
    registry.register("A.Widget", Widget)
    assert registry.identifiers() == ["A.Widget", "B.Gadget"]
    assert "A.Widget" in registry
    assert len(registry) == 2
    assert registry.get("A.Widget") is Widget

    registry.unregister("A.Widget")
    assert not registry.has("A.Widget")
    with pytest.raises(BindingResolutionError):
        registry.instantiate("A.Widget")
