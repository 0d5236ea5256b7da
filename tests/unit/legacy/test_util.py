from wordtable.legacy.readers.util import validate_name, split_args, unescape


def test_validate_name():
    assert validate_name('animal')
    assert validate_name('Noun_2-x')
    assert not validate_name('')
    assert not validate_name('two words')
    assert not validate_name('кот')
    assert not validate_name('a.b')


def test_split_args():
    assert split_args('name  animal') == ['name', 'animal']
    assert split_args('type animal "cat dog" *') == ['type', 'animal', 'cat dog', '*']
    assert split_args('type animal "cat dog" ""') == ['type', 'animal', 'cat dog', '']
    assert split_args(r'hidden "say \"hi\""') == ['hidden', 'say "hi"']
    assert split_args('') == []


def test_unescape():
    assert unescape('plain') == 'plain'
    assert unescape(r'a\sb') == 'a b'
    assert unescape(r'a\nb\tc') == 'a\nb\tc'
    assert unescape(r'été') == 'été'
    assert unescape(r'\\') == '\\'
    assert unescape(r'why\?') == 'why?'


def test_unescape_codes():
    assert unescape(r'\u0041b') == 'Ab'
    assert unescape(r'\u00e9t\u00e9') == 'été'
    assert unescape(r'line\r\n') == 'line\r\n'
    # Incomplete code is just an escaped "u"
    assert unescape(r'\u00') == 'u00'
