#
# rgbsync - Copyright (C) 2026 rgbsync developers
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#

# pylint: disable=no-member,protected-access

import sys

from collections import OrderedDict
from collections.abc import Iterable, Mapping
from enum import Enum

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigurationError


class Configuration:
    """
    Configuration hierarchy

    This is a hierarchical object with attribute access. When a
    null attribute is queried, ask for the parent recursively.
    Supports key search and conversion to dict. Instances are
    immutable once created.
    Attributes are coerced to the declared types when loaded,
    and unknown keys are rejected.

    Call "create" to generate a derived type.
    """
    __slots__ = ()


    @classmethod
    def create(cls, name: str, fields: list, hierarchical: bool = True):
        """
        Derive a new Configuration class type.

        :param name: Name of the new type
        :param fields: List of fields and types
        :param hierarchical: If False, instances inherit from a parent
                             but are not tracked as its children

        :return: The derived Configuration class
        """
        field_names = [n for n, t in fields]

        derived = cls.__class__(name, (cls, object), \
            {'__slots__': (*field_names, 'parent', '_children'),
             '_yaml_cache': {},
             '_hierarchical': hierarchical,
             '_field_types': OrderedDict(fields)})

        return derived


    def __init__(self, parent=None, **kwargs):
        slots = self.__slots__
        if 'parent' not in slots:
            raise TypeError('Call create() to create a derived Configuration')

        for k in slots:
            object.__setattr__(self, k, kwargs.get(k))

        object.__setattr__(self, 'parent', parent)
        if isinstance(parent, Configuration) and self._hierarchical:
            parent._add_child(self)


    def __str__(self):
        clsname = self.__class__.__name__
        values = ', '.join('%s=%r' % (k, getattr(self, k)) \
            for k in self.__slots__ if k not in ('parent', '_children') \
                and getattr(self, k) is not None)

        return '%s(%s)' % (clsname, values)


    __repr__ = __str__


    @property
    def children(self) -> tuple:
        """
        Children which inherit properties of this instance
        """
        return self._children


    def _add_child(self, child):
        if self._children is None:
            object.__setattr__(self, '_children', (child,))
        else:
            object.__setattr__(self, '_children', (*self._children, child))


    def __setattr__(self, name, value):
        raise AttributeError('\'%s\' object is read-only (attr=\'%s\')' % \
            (self.__class__.__name__, name))


    def __getattribute__(self, key):
        item = object.__getattribute__(self, key)

        if item is not None or \
                key in ('parent', 'children') or key.startswith('_'):
            return item

        parent = object.__getattribute__(self, 'parent')
        if parent is not None:
            return getattr(parent, key)

        return None


    def get(self, key: str, default=None):
        """
        Get a field by name

        :param key: Field name
        :param default: Default value if None
        :return: Value of the field
        """
        if key not in self._field_types:
            raise AttributeError('Invalid field: %s' % key)

        value = getattr(self, key)
        if value is None:
            return default
        return value


    def search(self, key: str, value) -> list:
        """
        Search for entries in the hierarchy

        :param key: Field name
        :param value: Field value
        :return: The matching entries
        """
        def search_recursive(obj, key, value):
            """
            Recursive search
            """
            if obj.get(key) == value:
                yield obj
            if obj.children:
                for child in obj.children:
                    yield from search_recursive(child, key, value)
        return [x for x in search_recursive(self, key, value)]


    def leaves(self) -> list:
        """
        All entries of the hierarchy which have no children
        """
        if not self.children:
            return [self]

        flat = []
        for child in self.children:
            flat.extend(child.leaves())
        return flat


    def _asdict(self) -> OrderedDict:
        od = OrderedDict()
        for field in self._field_types:
            value = getattr(self, field)
            if value is None:
                continue
            od[field] = value
        return od


    @classmethod
    def _resolve_type(cls, field_type):
        if not isinstance(field_type, str):
            return field_type

        if hasattr(cls, field_type):
            return getattr(cls, field_type)

        module = sys.modules[cls.__module__]
        if hasattr(module, field_type):
            return getattr(module, field_type)

        raise ConfigurationError("Can't convert field type '%s' in scope %s" \
            % (field_type, cls.__name__))


    @classmethod
    def _coerce_enum(cls, enum_type, val):
        if isinstance(val, str):
            key = val.upper()
            if key in enum_type.__members__:
                return enum_type[key]
        for member in enum_type:
            if member.value == val:
                return member
        raise ValueError('not one of %s' % ', '.join(m.name.lower() for m in enum_type))


    @classmethod
    def _coerce_types(cls, mapping):
        """
        Convert simple types where necessary and ensure ordering
        """
        unknown = [k for k in mapping if k not in cls._field_types \
                and not (k == 'children' and cls._hierarchical)]
        if unknown:
            raise ConfigurationError('Unknown %s field(s): %s' \
                % (cls.__name__, ', '.join(str(k) for k in unknown)))

        odict = OrderedDict()
        for field, field_type in cls._field_types.items():
            if field not in mapping:
                continue

            val = mapping[field]
            if val is None:
                continue

            if field_type is None:
                odict[field] = val
                continue

            field_type = cls._resolve_type(field_type)

            try:
                if isinstance(field_type, type) and issubclass(field_type, Enum):
                    odict[field] = cls._coerce_enum(field_type, val)
                elif field_type is bool:
                    if not isinstance(val, bool):
                        raise TypeError('expected a boolean')
                    odict[field] = val
                elif issubclass(field_type, (tuple, frozenset)):
                    if isinstance(val, str) or not isinstance(val, Iterable):
                        val = [val]
                    odict[field] = field_type(val)
                elif isinstance(val, field_type):
                    odict[field] = val
                elif isinstance(val, (Mapping, list)):
                    raise TypeError('expected %s' % field_type.__name__)
                else:
                    odict[field] = field_type(val)

            except (TypeError, ValueError) as err:
                raise ConfigurationError("Can't coerce %s to type %s (from %r): %s" %
                                         (field, getattr(field_type, '__name__', field_type),
                                          val, err)) from err

        return odict


    @classmethod
    def from_mapping(cls, mapping, parent=None):
        """
        Recursively create Configuration objects with the parent
        correctly set, returning the top-most object.

        :param mapping: Plain dict, as loaded from YAML
        :param parent: Parent configuration to inherit from
        """
        if mapping is None:
            return cls(parent=parent)

        if not isinstance(mapping, Mapping):
            raise ConfigurationError('Expected a mapping for %s, got %s' \
                % (cls.__name__, type(mapping).__name__))

        mapping = dict(mapping)
        children = None
        if cls._hierarchical:
            children = mapping.pop('children', None)
        config = cls(parent=parent, **cls._coerce_types(mapping))

        if children:
            for child in children:
                cls.from_mapping(child, parent=config)

        return config


    @classmethod
    def load_yaml(cls, filename: str, parent=None):
        """
        Load a hierarchy of sparse objects from a YAML file.

        :param filename: The filename to open.
        :param parent: Parent configuration to inherit from
        :return: The configuration object hierarchy
        """
        if parent is None and filename in cls._yaml_cache:
            return cls._yaml_cache[filename]

        try:
            with open(filename, 'r') as yaml_file:
                data = YAML(typ='safe').load(yaml_file)
        except YAMLError as err:
            raise ConfigurationError('Unable to parse %s: %s' % (filename, err)) from err

        config = cls.from_mapping(data, parent=parent)
        if parent is None:
            cls._yaml_cache[filename] = config

        return config
