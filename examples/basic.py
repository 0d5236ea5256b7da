import pathlib
path = pathlib.Path(__file__).parent.parent / 'tests' / 'integrational' / 'fixtures' / 'noun.dic'

from wordtable import Vocabulary

vocabulary = Vocabulary.from_file(str(path))

print(vocabulary.table)
print(vocabulary.table.entries)
print(vocabulary.select('plural', classes=['animal']))
print([str(entry) for entry in vocabulary.entries(exclude=['pet'])])
