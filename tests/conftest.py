"""
Shared fixtures: a small fonts repository on disk, a counting file system
and a hand-built language table.
"""

from collections import Counter
from pathlib import Path

import pytest
from gfmetadata.languages_public_pb2 import LanguageProto

from gffonts_index.infra import FileSystem

TESTDATA = Path(__file__).parent / "testdata"


def read_testdata(name: str) -> str:
    return (TESTDATA / name).read_text(encoding="utf-8")


class CountingFileSystem(FileSystem):
    """FileSystem that counts every call made through it."""

    def __init__(self):
        super().__init__()
        self.calls = Counter()

    def walk(self, root):
        self.calls['walk'] += 1
        return super().walk(root)

    def read_text(self, path):
        self.calls['read_text'] += 1
        return super().read_text(path)

    def exists(self, path):
        self.calls['exists'] += 1
        return super().exists(path)

    def list_dir(self, path):
        self.calls['list_dir'] += 1
        return super().list_dir(path)


TAGS_CSV = """\
Roboto, /Quality/Drawing, 80
Roboto, wght@100, /quant/stroke_width_min, 26.31
Kosugi Maru, /Sans/Rounded, 70
"""

QUANT_CSV = """\
Georama, "ital,wght@1,100", /quant/stroke_width_min, 16.97

Roboto, /quant/stroke_width_min, 30.5
"""

TAG_METADATA_CSV = """\
/Quality/Drawing, 0, 100, drawing quality
/quant/stroke_width_min, 0, 1000, minimum stroke width
/Sans/Rounded, 0, 100, "rounded, sans"
"""


@pytest.fixture
def fonts_repo(tmp_path):
    """
    A miniature fonts repository:
        ofl/broken/METADATA.pb          (unparseable)
        ofl/kosugimaru/METADATA.pb
        ofl/roboto/METADATA.pb          (+ Roboto[wdth,wght].ttf only)
        ofl/wixmadefortext/METADATA.pb  (has a position block)
        tags/all/*.csv, tags/tags_metadata.csv
    """
    families = {
        'kosugimaru': 'kosugimaru-metadata.pb',
        'roboto': 'roboto-metadata.pb',
        'wixmadefortext': 'wixmadefortext-metadata.pb',
    }
    for directory, fixture in families.items():
        family_dir = tmp_path / 'ofl' / directory
        family_dir.mkdir(parents=True)
        (family_dir / 'METADATA.pb').write_text(read_testdata(fixture), encoding='utf-8')

    broken = tmp_path / 'ofl' / 'broken'
    broken.mkdir(parents=True)
    (broken / 'METADATA.pb').write_text('name: "Broken"\nnot_a_field: 1\n', encoding='utf-8')
    (broken / 'README.md').write_text('not metadata\n', encoding='utf-8')

    (tmp_path / 'ofl' / 'roboto' / 'Roboto[wdth,wght].ttf').write_bytes(b'\x00\x01\x00\x00')

    tag_dir = tmp_path / 'tags' / 'all'
    tag_dir.mkdir(parents=True)
    (tag_dir / 'families.csv').write_text(TAGS_CSV, encoding='utf-8')
    (tag_dir / 'quant.csv').write_text(QUANT_CSV, encoding='utf-8')
    (tag_dir / 'notes.txt').write_text('not, a, tag, file, at all\n', encoding='utf-8')
    (tmp_path / 'tags' / 'tags_metadata.csv').write_text(TAG_METADATA_CSV, encoding='utf-8')

    return tmp_path


@pytest.fixture
def counting_fs():
    return CountingFileSystem()


def make_language(lang_id: str, script: str, population: int) -> LanguageProto:
    language = lang_id.split('_')[0]
    return LanguageProto(id=lang_id, language=language, script=script,
                         name=lang_id, population=population)


@pytest.fixture
def languages():
    """A small language table keyed by id, in a fixed order."""
    table = [
        make_language('en_Latn', 'Latn', 1_636_485_517),
        make_language('fr_Latn', 'Latn', 274_066_043),
        make_language('ja_Jpan', 'Jpan', 120_000_000),
        make_language('ryu_Jpan', 'Jpan', 1_000_000),
        make_language('ko_Kore', 'Kore', 80_000_000),
    ]
    return {lang.id: lang for lang in table}
