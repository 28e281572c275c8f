# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 11:20:12
# @Author : Kariko Lin

"""Line oriented `key = value` property specs.

    ```
    # comments, whole line or trailing
    name = value
    padded = "  kept  "
    hosts[] = a, b, \\
              c
    ports[:] = http:80, ssh:22
    ```

Keys ending in `[:]` hold tables, keys ending in `[]` hold lists,
anything else holds a plain string.
"""

from .spec import (
    DEFAULT_OPTIONS,
    LIST_SUFFIX,
    MAP_TABLE_SUFFIX,
    TABLE_SUFFIX,
    FormatError,
    KindMismatchError,
    ListProp,
    MissingKeyError,
    ParseOptions,
    PropertyStore,
    PropKind,
    PropSpecError,
    PropJsonHandler,
    PropSpecParser,
    PropYamlHandler,
    PropValue,
    ScalarProp,
    SpecIOError,
    TableProp,
    dumps,
    dumps_json,
    dumps_yaml,
    load,
    parse,
    segment
)

__all__ = [
    'DEFAULT_OPTIONS', 'LIST_SUFFIX', 'MAP_TABLE_SUFFIX', 'TABLE_SUFFIX',
    'FormatError', 'KindMismatchError', 'MissingKeyError', 'PropSpecError',
    'SpecIOError',
    'ListProp', 'PropertyStore', 'PropKind', 'PropValue', 'ScalarProp',
    'TableProp', 'ParseOptions',
    'PropSpecParser', 'PropJsonHandler', 'PropYamlHandler',
    'dumps', 'dumps_json', 'dumps_yaml', 'load', 'parse', 'segment'
]
