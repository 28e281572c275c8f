"""
pytest shared fixtures

    def test_something(canonical_store):
        assert canonical_store.get_string('zerovalue') == ''
"""

from pathlib import Path

import pytest

from propspec import PropertyStore, parse


CANONICAL_SPEC = r'''
# -------------------------------------------
# string type properties
# -------------------------------------------

# leading and trailing whitespace (tabs too) is removed
# from both keys and values.
prop one=prop one value                 # trailing comment
another property   =  value

# quotes keep leading or trailing spaces/tabs in values
log.info.level.id = "INFO "
leading.whitespace = " test"

# continued lines are appended as they are, leading chars included.
long one = This sentence ends \
in 4 spaces\
    .

zerovalue =

# -------------------------------------------
# list type properties
# -------------------------------------------
an array [] = 1 , 2 , 3
another.array[] = "  1" , " 20", 300

multi-line[] = a, b, c, \
               12\
 4567  ,\
               d, e         # fused element

another.one[] = \
    a, \
    b, \
    c

empty[] =

# -------------------------------------------
# table type properties
# -------------------------------------------
a map[:] = a:1 , b:2, c : 3 , d:4

multline.map[:] = \
  a:1 , \
  b:2, c:3, \
  d:4

zv.entry.map[:] =  foo:bar, zerovalue:
empty.map[:] =
'''


@pytest.fixture
def canonical_text() -> str:
    return CANONICAL_SPEC


@pytest.fixture
def canonical_store() -> PropertyStore:
    return parse(CANONICAL_SPEC)


@pytest.fixture
def spec_file(tmp_path: Path) -> Path:
    path = tmp_path / 'app.conf'
    path.write_text(CANONICAL_SPEC, encoding='utf-8')
    return path


@pytest.fixture
def parent_file(tmp_path: Path) -> Path:
    path = tmp_path / 'base.conf'
    path.write_text(
        'an array [] = 0, 1\n'
        'a map[:] = a:9, z:26\n'
        'zerovalue = from parent\n'
        'only.in.parent = yes\n',
        encoding='utf-8')
    return path
