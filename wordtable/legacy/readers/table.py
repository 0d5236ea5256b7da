"""
Reads legacy ``*.dic`` table file and creates :class:`Table <wordtable.legacy.data.table.Table>`.

The file consists of the *header* (directives defining the table) and the *body* (entries with their
properties; scoped directives like ``#class add`` can be mixed in). For example:

.. code-block:: text

    #name noun
    #subs singular plural
    #hidden vulgar
    #type gender "male female" "animate"

    #class add animate
    > cat/cats
    | gender female
    | pron kat/kats
    >> mouse/mice
    | gender male
    | weight 2
    #class remove animate

    > rock/rocks

Reading is one pass over :mod:`tokens <wordtable.legacy.readers.lexer>`; all the state of it is
kept in :class:`Context`. After all tokens are processed, entries are checked against declared types
(see :meth:`validate_types`), and then the table is assembled and committed.

Any problem is reported by raising :class:`LegacyTableLoadError <wordtable.legacy.errors.LegacyTableLoadError>`
pointing to the line of the problem. Reading stops at the first problem found.

.. autofunction:: read_table

.. autoclass:: Context
    :members:

Internal methods
^^^^^^^^^^^^^^^^

.. autofunction:: read_directive
.. autofunction:: read_entry
.. autofunction:: read_property
.. autofunction:: validate_types
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from wordtable.legacy.algo import diff
from wordtable.legacy.data.entry import Entry
from wordtable.legacy.data.table import Table
from wordtable.legacy.data.typedef import TypeDef, TypeDefFilter
from wordtable.legacy.errors import LegacyTableLoadError
from wordtable.legacy.readers.file_reader import BaseReader
from wordtable.legacy.readers.lexer import Token, TokenType, tokenize
from wordtable.legacy.readers.util import split_args, unescape, validate_name


logger = logging.getLogger(__name__)

DEFAULT_SUBTYPES = ['default']
DEFAULT_HIDDEN = {'nsfw'}

HEADER_DIRECTIVES = {'name', 'subs', 'version', 'hidden', 'type'}

WEIGHT_REGEXP = re.compile(r'^[+-]?[0-9]+$')
INT32_MIN, INT32_MAX = -2**31, 2**31 - 1


@dataclass
class Context:
    """
    Whole state of table reading, changed by each token.
    """

    #: Path of the source, for error messages
    path: str

    #: Table name (``#name``), lowercase
    name: str = ''
    #: Subtype names (``#subs``), lowercase
    subtypes: List[str] = field(default_factory=lambda: list(DEFAULT_SUBTYPES))
    #: ``True`` until the first entry is read
    header: bool = True

    #: Classes added by ``#class add`` (and removed by ``#class remove``); every new entry receives
    #: the copy of them
    scoped_classes: Set[str] = field(default_factory=set)
    #: Classes declared with ``#hidden``
    hidden_classes: Set[str] = field(default_factory=lambda: set(DEFAULT_HIDDEN))
    #: Types declared with ``#type``
    types: Dict[str, TypeDef] = field(default_factory=dict)

    #: Entry being currently read: properties are applied to it
    entry: Optional[Entry] = None
    #: All entries read, with tokens they were read from (to report type errors on proper lines)
    entries: List[Tuple[Entry, Token]] = field(default_factory=list)

    def error(self, token: Token, message: str) -> LegacyTableLoadError:
        return LegacyTableLoadError(self.path, token.line, message)


def read_table(source: BaseReader) -> Table:
    """
    Reads source (file or zipfile) and creates committed :class:`Table <wordtable.legacy.data.table.Table>`
    from it.

    Args:
        source: "Reader" (thin wrapper around opened file or zipfile, targeting line-by-line reading)

    Raises:
        LegacyTableLoadError: on the first problem in the source
    """

    logger.debug(f"Reading table from {source.path}")

    context = Context(path=source.path)

    for token in tokenize(source):
        if token.type == TokenType.DIRECTIVE:
            read_directive(token, context=context)
        elif token.type in (TokenType.ENTRY, TokenType.DIFF_ENTRY):
            read_entry(token, context=context)
        elif token.type == TokenType.PROPERTY:
            read_property(token, context=context)

    if context.types:
        validate_types(context)

    table = Table(context.name, len(context.subtypes), context.hidden_classes)
    for i, subtype in enumerate(context.subtypes):
        table.add_subtype(subtype, i)
    for entry, _ in context.entries:
        table.add_entry(entry)
    table.commit()

    logger.info(f"Loaded table '{table.name}' from {source.path}: {len(table)} entries")

    return table


# Directives
# ----------

def read_directive(token: Token, *, context: Context):
    """
    Reads one directive (line starting with ``#``). Unknown directives are ignored: older and newer
    versions of the format have some we don't need.
    """

    parts = split_args(token.value)
    if not parts:
        return

    name, *args = parts
    name = name.lower()

    if name in HEADER_DIRECTIVES and not context.header:
        raise context.error(token, f"The #{name} directive may only be used in the file header.")

    handler = DIRECTIVES.get(name)
    if handler is None:
        logger.debug(f"{context.path}:{token.line}: ignoring unknown directive #{name}")
        return

    handler(token, args, context)


def _name(token: Token, args: List[str], context: Context):
    if len(args) != 1:
        raise context.error(token, f"#name directive expected one word: {token.value}")
    if not validate_name(args[0]):
        raise context.error(token, f"Invalid #name value: '{args[0]}'")
    context.name = args[0].lower()


def _subs(token: Token, args: List[str], context: Context):
    if not args:
        raise context.error(token, "#subs directive expected at least one subtype name.")
    context.subtypes = [arg.strip().lower() for arg in args]


def _version(token: Token, args: List[str], context: Context):
    # Kept for backwards compatibility, nothing to do with it
    pass


def _hidden(token: Token, args: List[str], context: Context):
    if not args:
        raise context.error(token, "#hidden directive expected a class name.")
    if validate_name(args[0]):
        context.hidden_classes.add(args[0])
    else:
        logger.warning(f"{context.path}:{token.line}: invalid hidden class name '{args[0]}' ignored")


# Deprecated: the same as "#class add nsfw"
def _nsfw(token: Token, args: List[str], context: Context):
    context.scoped_classes.add('nsfw')


# Deprecated: the same as "#class remove nsfw"
def _sfw(token: Token, args: List[str], context: Context):
    context.scoped_classes.discard('nsfw')


def _class(token: Token, args: List[str], context: Context):
    if len(args) < 2:
        raise context.error(token, "The #class directive expects an operation and at least one value.")

    operation, *values = args
    operation = operation.lower()
    if operation == 'add':
        context.scoped_classes.update(value.lower() for value in values)
    elif operation == 'remove':
        context.scoped_classes.difference_update(value.lower() for value in values)
    else:
        logger.warning(f"{context.path}:{token.line}: unknown #class operation '{operation}' ignored")


def _type(token: Token, args: List[str], context: Context):
    if len(args) != 3:
        raise context.error(token, "#type directive requires 3 arguments.")

    name, classes, filter_expr = args
    if name in context.types:
        raise context.error(token, f"Type '{name}' is already defined.")

    context.types[name] = TypeDef(
        name,
        set(classes.split()),
        None if not filter_expr.strip() else TypeDefFilter.parse(filter_expr)
    )


DIRECTIVES = {
    'name': _name,
    'subs': _subs,
    'version': _version,
    'hidden': _hidden,
    'nsfw': _nsfw,
    'sfw': _sfw,
    'class': _class,
    'type': _type,
}


# Entries
# -------

def read_entry(token: Token, *, context: Context):
    """
    Reads entry (``> cat/cats``) or diff entry (``>> mouse/mice``), making it current (receiving
    further properties).

    For diff entry, the first form is stored as is, and the rest are stored as edit scripts relative
    to it, see :mod:`diff <wordtable.legacy.algo.diff>`. Every form, including the alternate ones,
    is stripped of surrounding whitespace before encoding, so ``>> mouse / mice`` encodes ``mice``,
    not ``" mice"``.
    """

    if not context.name.strip():
        raise context.error(token, "Missing table name before entry list.")
    if not token.value.strip():
        raise context.error(token, "Encountered empty entry.")

    context.header = False

    forms = [form.strip() for form in token.value.split('/')]
    is_diff = token.type == TokenType.DIFF_ENTRY
    if is_diff:
        base = forms[0]
        forms = [base, *(diff.mark(base, form) for form in forms[1:])]

    entry = Entry.build(forms, context.scoped_classes, diff=is_diff)
    context.entries.append((entry, token))
    context.entry = entry


# Properties
# ----------

def read_property(token: Token, *, context: Context):
    """
    Reads property (``| class pet``) of the current entry. Besides known properties (``class``,
    ``weight``, ``pron``), the property name might be the name of declared type.
    """

    parts = token.value.split(None, 1)
    if not parts:
        raise context.error(token, "Empty property field.")
    if context.entry is None:
        raise context.error(token, "Property without preceding entry.")

    name = parts[0].lower()
    value = parts[1] if len(parts) == 2 else None

    handler = PROPERTIES.get(name)
    if handler is not None:
        handler(token, value, context)
    else:
        _typed(token, parts[0], value, context)


def _class_property(token: Token, value: Optional[str], context: Context):
    if value is None:
        return

    for cls in value.split():
        optional = cls.endswith('?')
        context.entry.add_class(unescape(cls[:-1] if optional else cls), optional)


def _weight(token: Token, value: Optional[str], context: Context):
    if value is None:
        raise context.error(token, "'weight' property expected a value.")
    value = value.strip()
    if not WEIGHT_REGEXP.match(value) or not INT32_MIN <= int(value) <= INT32_MAX:
        raise context.error(token, f"Invalid weight value: '{value}'")
    context.entry.weight = int(value)


def _pron(token: Token, value: Optional[str], context: Context):
    if value is None:
        raise context.error(token, "'pron' property expected a value.")

    prons = [pron.strip() for pron in value.split('/')]
    if len(prons) != len(context.subtypes):
        logger.warning(
            f"{context.path}:{token.line}: {len(prons)} pronunciations for {len(context.subtypes)} "
            "subtypes, ignored"
        )
        return

    for term, pron in zip(context.entry.terms, prons):
        term.pronunciation = pron


def _typed(token: Token, name: str, value: Optional[str], context: Context):
    typedef = context.types.get(name)
    if typedef is None:
        raise context.error(token, f"Unknown property name '{name}'.")
    if value is None:
        raise context.error(token, "Missing type value.")

    value = unescape(value.strip())
    context.entry.add_class(value)
    if not typedef.is_valid_value(value):
        raise context.error(token, f"'{value}' is not a valid value for type '{typedef.name}'.")


PROPERTIES = {
    'class': _class_property,
    'weight': _weight,
    'pron': _pron,
}


# Validation
# ----------

def validate_types(context: Context):
    """
    Checks that every entry satisfies every declared type (see :meth:`TypeDef.test <wordtable.legacy.data.typedef.TypeDef.test>`).
    Fails on the first entry that doesn't.
    """

    for entry, token in context.entries:
        for typedef in context.types.values():
            if not typedef.test(entry):
                # TODO: collect all violations into one report instead of stopping at the first
                raise context.error(token, f"Entry '{entry}' does not satisfy type '{typedef.name}'.")
