import copy

import pytest

from dragonforge.singleton import Singleton, SingletonError


class Engine(Singleton):
    def __init__(self, name="engine"):
        self.name = name
        self.closed = False

    def close(self):
        self.closed = True


class Other(Singleton):
    pass


@pytest.fixture(autouse=True)
def reset():
    yield
    for cls in (Engine, Other):
        if Singleton.get_instance.__func__(cls) is not None:
            Singleton.deinitialize.__func__(cls)


def test_initialize_returns_instance():
    engine = Singleton.initialize.__func__(Engine, name="df")
    assert Singleton.get_instance.__func__(Engine) is engine
    assert engine.name == "df"


def test_double_initialize_raises():
    Singleton.initialize.__func__(Engine)
    with pytest.raises(SingletonError):
        Singleton.initialize.__func__(Engine)


def test_deinitialize_clears_and_closes():
    engine = Singleton.initialize.__func__(Engine)
    Singleton.deinitialize.__func__(Engine)
    assert Singleton.get_instance.__func__(Engine) is None
    assert engine.closed is True


def test_deinitialize_without_instance_raises():
    with pytest.raises(SingletonError):
        Singleton.deinitialize.__func__(Engine)


def test_subclasses_are_independent():
    engine = Singleton.initialize.__func__(Engine)
    assert Singleton.get_instance.__func__(Other) is None
    other = Singleton.initialize.__func__(Other)
    assert Singleton.get_instance.__func__(Engine) is engine
    assert Singleton.get_instance.__func__(Other) is other


def test_reinitialize_after_deinitialize():
    first = Singleton.initialize.__func__(Engine)
    Singleton.deinitialize.__func__(Engine)
    second = Singleton.initialize.__func__(Engine)
    assert Singleton.get_instance.__func__(Engine) is second
    assert second is not first


def test_copy_is_refused():
    engine = Singleton.initialize.__func__(Engine)
    with pytest.raises(TypeError):
        copy.copy(engine)
    with pytest.raises(TypeError):
        copy.deepcopy(engine)