import pytest

from wordtable.legacy.algo import diff


def test_mark():
    assert diff.mark('cat', 'cats') == '0:s'
    assert diff.mark('mouse', 'mice') == '4:ice'
    assert diff.mark('sheep', 'sheep') == '0:'
    assert diff.mark('go', 'went') == '2:went'


def test_apply():
    assert diff.apply('cat', '0:s') == 'cats'
    assert diff.apply('mouse', '4:ice') == 'mice'
    assert diff.apply('sheep', '0:') == 'sheep'
    assert diff.apply('go', '2:went') == 'went'


@pytest.mark.parametrize('base,alt', [
    ('child', 'children'),
    ('criterion', 'criteria'),
    ('', 'something'),
    ('ox', ''),
])
def test_mark_then_apply(base, alt):
    assert diff.apply(base, diff.mark(base, alt)) == alt


def test_apply_malformed():
    with pytest.raises(ValueError):
        diff.apply('cat', 'cats')
    with pytest.raises(ValueError):
        diff.apply('cat', 'x:s')
    with pytest.raises(ValueError):
        diff.apply('cat', '5:s')
