import pytest

from wordtable.legacy.data.entry import Entry
from wordtable.legacy.data.table import Table


def test_assembly():
    table = Table('noun', 2, {'nsfw', 'vulgar'})
    table.add_subtype('singular', 0)
    table.add_subtype('plural', 1)
    table.add_entry(Entry.build(['cat', 'cats'], []))
    table.add_entry(Entry.build(['dog', 'dogs'], ['pet']))
    table.commit()

    assert table.name == 'noun'
    assert table.subtype_count == 2
    assert table.subtypes == ('singular', 'plural')
    assert table.hidden_classes == frozenset({'nsfw', 'vulgar'})
    assert [str(entry) for entry in table.entries] == ['cat', 'dog']
    assert len(table) == 2
    assert repr(table) == 'Table(noun: singular/plural, 2 entries)'


def test_subtype_index():
    table = Table('noun', 2)
    table.add_subtype('singular', 0)
    table.add_subtype('plural', 1)

    assert table.subtype_index(None) == 0
    assert table.subtype_index('plural') == 1
    assert table.subtype_index('Plural') == 1
    with pytest.raises(LookupError):
        table.subtype_index('dual')


def test_subtype_out_of_range():
    table = Table('noun', 1)
    with pytest.raises(IndexError):
        table.add_subtype('plural', 1)


def test_committed():
    table = Table('noun', 1)
    table.add_subtype('default', 0)
    table.commit()

    with pytest.raises(RuntimeError):
        table.add_entry(Entry.build(['cat'], []))
    with pytest.raises(RuntimeError):
        table.add_subtype('plural', 0)
    with pytest.raises(RuntimeError):
        table.commit()

    assert len(table) == 0


def test_entry_forms():
    entry = Entry.build(['mouse', '4:ice'], ['animal'], diff=True)
    assert entry.form(0) == 'mouse'
    assert entry.form(1) == 'mice'
    assert entry[1].value == '4:ice'
    assert entry.term_count == 2

    plain = Entry.build(['cat', 'cats'], [])
    assert plain.form(1) == 'cats'


def test_entry_classes():
    scoped = {'animal'}
    entry = Entry.build(['cat'], scoped)
    scoped.add('pet')

    assert entry.classes == {'animal'}

    entry.add_class('small', optional=True)
    assert entry.has_class('small')
    assert entry.optional_classes == {'small'}
