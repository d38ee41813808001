"""construction, initial attributes and cloning"""
import pytest

from translucent import (Translucent, UnknownAttributeError, construct,
                         TranslucentError)
from translucent.omni import slog
from translucent.omni.data_types import factory


class Bird(Translucent, template={'name': 'sparrow', 'events': ['hatch']}):
    legs = 2


@pytest.fixture
def collected():
    handler = slog.CollectingHandler()
    factory.logger.add_handler(handler)
    try:
        yield handler
    finally:
        factory.logger.remove_handler(handler)


def test_keyword_attributes():
    bird = Bird(name='robin')
    assert bird.name() == 'robin'
    assert Bird.name() == 'sparrow'


def test_construct():
    bird = construct(Bird, {'name': 'jay'})
    assert isinstance(bird, Bird)
    assert bird.name() == 'jay'
    assert construct(Bird).name() == 'sparrow'


def test_unknown_attribute():
    with pytest.raises(UnknownAttributeError) as err:
        Bird(wings=2)
    assert isinstance(err.value, AttributeError)
    assert isinstance(err.value, TranslucentError)


def test_attribute_which_is_not_a_method():
    with pytest.raises(UnknownAttributeError):
        Bird(legs=3)


def test_special_names_are_not_attributes():
    with pytest.raises(UnknownAttributeError):
        construct(Bird, {'__class__': int})


def test_abstract_instantiation_warns(collected):
    obj = Translucent()
    assert isinstance(obj, Translucent)
    assert collected.messages(slog.WARNING) == [
        "Instantiation attempted of abstract class 'Translucent'"]


def test_subclass_instantiation_does_not_warn(collected):
    Bird()
    assert collected.messages(slog.WARNING) == []


def test_clone_copies_instance_values():
    bird = Bird(name='robin')
    bird.appendevents('fledge')
    twin = bird.clone()
    assert twin.name() == 'robin'
    assert twin.events() == ['hatch', 'fledge']
    twin.appendevents('fly')
    twin.name('jay')
    assert bird.name() == 'robin'
    assert bird.events() == ['hatch', 'fledge']


def test_clone_with_attributes():
    bird = Bird(name='robin')
    twin = bird.clone(name='wren')
    assert type(twin) is Bird
    assert twin.name() == 'wren'
    assert twin.events() == ['hatch']
