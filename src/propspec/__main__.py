# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2024/11/04 19:42:05
# @Author : Kariko Lin

"""`python -m propspec FILE` prints the canonical form of a spec file."""

import argparse
import logging
import sys

from .spec import (
    MAP_TABLE_SUFFIX,
    TABLE_SUFFIX,
    ParseOptions,
    PropertyStore,
    PropSpecError,
    PropSpecParser,
    dumps,
    dumps_json,
    dumps_yaml
)

logger = logging.getLogger('propspec')

RENDERERS = {'spec': dumps, 'json': dumps_json, 'yaml': dumps_yaml}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='propspec',
        description='parse a property spec file and print it canonically')
    parser.add_argument('file', help='the spec file to read')
    parser.add_argument(
        '-p', '--parent', action='append', default=[], metavar='FILE',
        help='inherit from this spec file, nearest first (repeatable)')
    parser.add_argument(
        '-k', '--key', action='append', default=[], metavar='KEY',
        help='only print this key (repeatable)')
    parser.add_argument(
        '--map-suffix', action='store_true',
        help=f'table keys end in `{MAP_TABLE_SUFFIX}` '
             f'instead of `{TABLE_SUFFIX}`')
    parser.add_argument(
        '--lenient', action='store_true',
        help='skip malformed lines instead of failing')
    parser.add_argument('--encoding', default='utf-8')
    parser.add_argument(
        '-f', '--format', choices=sorted(RENDERERS), default='spec',
        help='output format (default: spec)')
    parser.add_argument(
        '-v', '--verbose', action='count', default=0,
        help='-v for info, -vv for debug log')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=(logging.WARNING, logging.INFO, logging.DEBUG)[
            min(args.verbose, 2)],
        format='[%(asctime)s] %(levelname)s: %(message)s')

    options = ParseOptions(
        table_suffix=MAP_TABLE_SUFFIX if args.map_suffix else TABLE_SUFFIX,
        strict=not args.lenient,
        encoding=args.encoding)
    try:
        store = PropSpecParser(args.file, options).readfiles(*args.parent)
        if args.key:
            if missing := store.must_have(*args.key):
                logger.error('missing keys: %s', ', '.join(missing))
                return 2
            picked = PropertyStore(options)
            for k in args.key:
                picked[k] = store[k]
            store = picked
        text = RENDERERS[args.format](store)
        sys.stdout.write(text if text.endswith('\n') else text + '\n')
    except PropSpecError as e:
        logger.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
