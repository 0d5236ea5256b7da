from wordtable.legacy.data.entry import Entry
from wordtable.legacy.data.typedef import TypeDef, TypeDefFilter


def entry(*classes):
    return Entry.build(['cat'], classes)


def test_filter_parse():
    assert TypeDefFilter.parse(' * ') == TypeDefFilter(wildcard=True)
    assert TypeDefFilter.parse('noun !proper ??').parts == [('noun', True), ('proper', False)]


def test_filter_applies():
    wildcard = TypeDefFilter.parse('*')
    assert wildcard.applies(entry())
    assert wildcard.applies(entry('anything'))

    filter = TypeDefFilter.parse('noun !proper')
    assert filter.applies(entry('noun'))
    assert filter.applies(entry('noun', 'animal'))
    assert not filter.applies(entry('noun', 'proper'))
    assert not filter.applies(entry('verb'))


def test_valid_value():
    typedef = TypeDef('gender', {'male', 'female'})
    assert typedef.is_valid_value('male')
    assert not typedef.is_valid_value('neuter')


def test_test_exactly_one():
    typedef = TypeDef('gender', {'male', 'female'}, TypeDefFilter.parse('*'))

    assert typedef.test(entry('male'))
    assert typedef.test(entry('female', 'animal'))
    assert not typedef.test(entry())
    assert not typedef.test(entry('male', 'female'))


def test_test_filtered_out():
    typedef = TypeDef('gender', {'male', 'female'}, TypeDefFilter.parse('animate'))

    assert typedef.test(entry('rock'))
    assert typedef.test(entry('rock', 'male', 'female'))
    assert not typedef.test(entry('animate'))


def test_test_without_filter():
    # No filter: the type applies to nothing
    typedef = TypeDef('gender', {'male', 'female'})

    assert typedef.test(entry())
    assert typedef.test(entry('male', 'female'))


def test_filter_parse_loose_tokens():
    assert TypeDefFilter.parse('(animate) !!plant').parts == [('(animate)', True), ('plant', False)]

    filter = TypeDefFilter.parse('!!plant')
    assert filter.applies(entry('animal'))
    assert not filter.applies(entry('plant'))
