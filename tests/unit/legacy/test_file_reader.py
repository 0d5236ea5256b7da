import io

from wordtable.legacy.readers import BaseReader, FileReader


def test_lines(tmp_path):
    path = tmp_path / 'basic.dic'
    path.write_text("#name animal\n\n   \n> cat\n", encoding='utf-8')

    reader = FileReader(str(path))

    assert list(reader) == [(1, '#name animal'), (4, '> cat')]
    assert reader.path == str(path)
    reader.close()


def test_bom(tmp_path):
    path = tmp_path / 'bom.dic'
    path.write_bytes('\ufeff#name animal\n> кот\n'.encode('utf-8'))

    reader = FileReader(str(path))

    assert list(reader) == [(1, '#name animal'), (2, '> кот')]
    reader.close()


def test_encoding(tmp_path):
    path = tmp_path / 'cp1251.dic'
    path.write_bytes('#name animal\n> кот\n'.encode('Windows-1251'))

    reader = FileReader(str(path), encoding='Windows-1251')

    assert list(reader) == [(1, '#name animal'), (2, '> кот')]
    reader.close()


def test_stringio():
    stringio = io.StringIO("""#name animal

    // comment
    > cat
  """)

    reader = BaseReader(stringio)

    assert reader.path == '<string>'
    assert list(reader) == [(1, '#name animal'), (3, '// comment'), (4, '> cat')]
