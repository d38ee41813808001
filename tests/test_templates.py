"""access tiers, scopes and the role functions generated accessors call"""
import pytest

from translucent import (access_check, scope_policy, method_templates,
                         datatype_of, access_tier, scope_of,
                         register_method_template, register_datatype,
                         Translucent, READS)
from translucent.omni.data_types import templates
from translucent.omni.data_types.templates import Slot


def make_slot(value):
    return Slot({'items': value}, 'items')


# ---------------------------------------------------------------- lookups
@pytest.mark.parametrize('attribute, tier', [
    ('name', 'public'),
    ('Name', 'public'),
    ('_name', 'protected'),
    ('_Name', 'protected'),
    ('__name', 'private'),
    ('___name', 'private'),
])
def test_access_tier(attribute, tier):
    assert access_tier(attribute) == tier


@pytest.mark.parametrize('attribute, scope', [
    ('name', 'instance'),
    ('_name', 'instance'),
    ('__name', 'instance'),
    ('Name', 'class'),
    ('_Name', 'class'),
    ('__Name', 'class'),
])
def test_scope_of(attribute, scope):
    assert scope_of(attribute) == scope


def test_access_check_lookup():
    assert access_check('public') is templates.check_public
    assert access_check('protected') is templates.check_protected
    assert access_check('private') is templates.check_private
    assert access_check('secret') is None


def test_scope_policy_lookup():
    assert scope_policy('class') is templates.class_scope
    assert scope_policy('instance') is templates.instance_scope
    assert scope_policy('global') is None


def test_method_templates():
    assert set(method_templates()) == {'attribute'}
    assert set(method_templates('sequence')) == {
        'attribute', 'appendAttribute', 'removeLastAttribute',
        'removeFirstAttribute', 'prependAttribute', 'spliceAttribute',
        'sliceAttribute'}
    assert set(method_templates('mapping')) == {
        'attribute', 'deleteAttribute', 'setAttribute', 'getAttribute'}


def test_unknown_datatype_has_no_roles():
    assert method_templates('no such datatype') == {}


def test_datatype_of():
    assert datatype_of([1, 2]) == 'sequence'
    assert datatype_of({'a': 1}) == 'mapping'
    assert datatype_of('abc') is None
    assert datatype_of((1, 2)) is None
    assert datatype_of(None) is None


# ------------------------------------------------------------------ roles
def test_get_or_set():
    slot = make_slot(1)
    assert templates.get_or_set(slot) == 1
    assert templates.get_or_set(slot, 2) == 2
    assert slot.store == {'items': 2}
    with pytest.raises(TypeError):
        templates.get_or_set(slot, 3, 4)


def test_append_and_prepend_return_the_new_length():
    slot = make_slot(['b'])
    assert templates.append_items(slot, 'c', 'd') == 3
    assert templates.prepend_items(slot, 'y', 'a') == 5
    assert slot.value == ['y', 'a', 'b', 'c', 'd']


def test_append_to_nothing_makes_a_list():
    slot = make_slot(None)
    assert templates.append_items(slot, 1) == 1
    assert slot.value == [1]


def test_remove_last_and_first():
    slot = make_slot([1, 2, 3])
    assert templates.remove_last(slot) == 3
    assert templates.remove_first(slot) == 1
    assert slot.value == [2]


def test_remove_from_empty_gives_none():
    assert templates.remove_last(make_slot([])) is None
    assert templates.remove_first(make_slot(None)) is None


@pytest.mark.parametrize('args, removed, result', [
    ((1, 2, 'a'), [1, 2], [0, 'a', 3, 4]),
    ((1,), [1, 2, 3, 4], [0]),
    ((-2,), [3, 4], [0, 1, 2]),
    ((1, -1), [1, 2, 3], [0, 4]),
    ((2, 0, 'x', 'y'), [], [0, 1, 'x', 'y', 2, 3, 4]),
    ((10, 2, 'z'), [], [0, 1, 2, 3, 4, 'z']),
])
def test_splice(args, removed, result):
    slot = make_slot([0, 1, 2, 3, 4])
    assert templates.splice_items(slot, *args) == removed
    assert slot.value == result


def test_slice_pads_missing_indexes_with_none():
    slot = make_slot([0, 1, 2, 3, 4])
    assert templates.slice_items(slot, 0, -1, 10) == [0, 4, None]
    assert templates.slice_items(make_slot(None), 0) == [None]


def test_set_get_and_delete_keys():
    slot = make_slot({'one': 1})
    assert templates.set_items(slot, 'two', 2, three=3) == ['two', 'three']
    assert templates.get_keys(slot, 'one', 'three', 'four') == [1, 3, None]
    assert templates.delete_keys(slot, 'one', 'four') == [1, None]
    assert slot.value == {'two': 2, 'three': 3}


def test_set_items_needs_pairs():
    with pytest.raises(TypeError):
        templates.set_items(make_slot({}), 'lonely')


def test_copy_default_copies_containers_only():
    items = [1, 2]
    table = {'a': 1}
    text = 'shared'
    assert templates.copy_default(items) == items
    assert templates.copy_default(items) is not items
    assert templates.copy_default(table) is not table
    assert templates.copy_default(text) is text


# ------------------------------------------------------------- extensions
class Counter(object):
    def __init__(self, *items):
        self.items = list(items)


def count_items(slot):
    return len(slot.value.items)


def test_custom_datatype_gets_its_own_roles():
    register_datatype('counter', Counter)
    register_method_template('counter', 'countAttribute', count_items, READS)
    assert datatype_of(Counter()) == 'counter'

    class Tally(Translucent, template={'votes': Counter('a', 'b')}):
        pass

    assert Tally.countvotes() == 2
    assert isinstance(Tally().votes(), Counter)


def test_set_items_reports_each_key_once():
    slot = make_slot({})
    keys = templates.set_items(slot, 'a', 1, 'b', 2, 'a', 3, b=4)
    assert keys == ['a', 'b']
    assert slot.value == {'a': 3, 'b': 4}
