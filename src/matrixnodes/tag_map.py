import re
from itertools import groupby
from typing import NamedTuple

from .errors import InvalidConfiguration

TAG_PATTERN = re.compile(r'^[A-Z_][A-Z0-9_]*$')
NAME_PATTERN = re.compile(r'^[a-z_][a-z0-9_]*$')
INDEX_PATTERN = re.compile(r'^(0|[1-9][0-9]*)$')


class TagIndexName(NamedTuple):
    tag: str
    index: int
    name: str

    def __str__(self):
        if self.tag == '':
            return self.name
        return f"{self.tag}:{self.index}:{self.name}"


def parse_tag_index_name(definition):
    """
    Parses "TAG:index:name", "TAG:name" and "name".
    Returns (tag, index, name), index is None if it was not given explicitly.
    """
    if not isinstance(definition, str):
        raise InvalidConfiguration(f'Port definition must be a string. Got: {definition!r}')

    splits = definition.split(':')
    if len(splits) > 3:
        raise InvalidConfiguration(f'Too many ":" in port definition: "{definition}"')
    # the tag always comes first, the name last
    name = splits[-1]
    tag = splits[0] if len(splits) > 1 else ''
    index = splits[1] if len(splits) == 3 else None

    if not NAME_PATTERN.match(name):
        raise InvalidConfiguration(f'Invalid stream name "{name}" in "{definition}". Names are lower case identifiers.')

    if len(splits) == 1:
        return '', None, name

    if not TAG_PATTERN.match(tag):
        raise InvalidConfiguration(f'Invalid tag "{tag}" in "{definition}". Tags are upper case identifiers.')

    if len(splits) == 2:
        return tag, None, name

    if not INDEX_PATTERN.match(index):
        raise InvalidConfiguration(f'Invalid index "{index}" in "{definition}".')
    return tag, int(index), name


class TagMap():
    """
    Maps the configured port strings of one node side (ie its input streams) to contiguous ids.
    Ids are ordered by tag and then index, so every tag owns a contiguous range.
    """

    def __init__(self, definitions=()):
        self.definitions = list(definitions)

        parsed = list(map(parse_tag_index_name, self.definitions))

        # fill in implicit indices in order of appearance
        next_index = {}
        entries = []
        for tag, index, name in parsed:
            if index is None:
                index = next_index.get(tag, 0)
            next_index[tag] = max(next_index.get(tag, 0), index + 1)
            entries.append(TagIndexName(tag, index, name))

        entries = sorted(entries, key=lambda e: (e.tag, e.index))
        for tag, group in groupby(entries, key=lambda e: e.tag):
            indices = [e.index for e in group]
            if indices != list(range(len(indices))):
                raise InvalidConfiguration(
                    f'Indices of tag "{tag}" must be unique and contiguous starting at 0. Got: {indices}')

        self._entries = entries
        self._ids = {(e.tag, e.index): i for i, e in enumerate(entries)}

    def __repr__(self):
        return f"TagMap({', '.join(map(str, self._entries))})"

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def num_entries(self, tag=None):
        if tag is None:
            return len(self._entries)
        return len([e for e in self._entries if e.tag == tag])

    def has_tag(self, tag):
        return self.num_entries(tag) > 0

    def tags(self):
        return list(dict.fromkeys(e.tag for e in self._entries))

    def names(self):
        return [e.name for e in self._entries]

    def get_id(self, tag, index=0):
        try:
            return self._ids[(tag, index)]
        except KeyError:
            raise InvalidConfiguration(f'No port with tag "{tag}" and index {index}. Available: {self}')

    def entry(self, id):
        return self._entries[id]
