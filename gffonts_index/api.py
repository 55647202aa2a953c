"""
High-level Python API for gffonts_index.

Provides a cached, read-only view of a local checkout of the Google Fonts
repository.

Example:
    import gffonts_index

    gf = gffonts_index.GoogleFonts("~/oss/fonts")

    # Discover families (malformed ones are reported, not dropped)
    for entry in gf.families():
        if entry.ok:
            print(entry.family.name, entry.path)
        else:
            print("bad metadata", entry.path, entry.error)

    # Pick representative fonts and sample languages
    family = gf.family_by_name("Roboto")
    font = gf.exemplar(family)
    print(gf.find_font_binary(font))
    print(gf.primary_language(family).id)

    # Quality tags
    for tagging in gf.family_tags("Roboto"):
        print(tagging.tag, tagging.value)
"""

from pathlib import Path
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Pattern, Tuple, TypeVar, Union
import logging
import re

from google.protobuf import text_format
from gfmetadata.fonts_public_pb2 import FamilyProto, FontProto
from gfmetadata.languages_public_pb2 import LanguageProto

from .domain import FamilyEntry, Tagging, TagMetadata
from .errors import TagFileError, TagFormatError
from .infra import FileSystem
from .languages import load_languages, primary_language
from .reader import read_family
from .selection import FontStyle, exemplar, select_font
from .tags import filter_taggings

logger = logging.getLogger(__name__)

METADATA_FILENAME = "METADATA.pb"
TAGS_DIR = Path("tags") / "all"
TAG_METADATA_FILE = Path("tags") / "tags_metadata.csv"

T = TypeVar("T")


def iter_families(
    root: Path,
    family_filter: Optional[Pattern] = None,
    fs: Optional[FileSystem] = None,
) -> Iterator[FamilyEntry]:
    """
    Discover and parse every METADATA.pb below root.

    Args:
        root: Repository root
        family_filter: Regex searched for in each METADATA.pb path
        fs: File system to use (creates default if None)

    Yields:
        FamilyEntry for each discovered file, including unparseable ones
    """
    fs = fs or FileSystem()
    for path in fs.walk(root):
        if path.name != METADATA_FILENAME:
            continue
        if family_filter is not None and not family_filter.search(str(path)):
            continue
        try:
            family = read_family(fs.read_text(path))
        except (OSError, UnicodeDecodeError, text_format.ParseError) as e:
            logger.debug(f"Unable to read {path}: {e}")
            yield FamilyEntry(path=path, error=e)
            continue
        yield FamilyEntry(path=path, family=family)


def _read_rows(path: Path, fs: FileSystem, parse: Callable[[str], T]) -> List[T]:
    """Parse every non-blank line of a tag file; any bad row fails the file."""
    try:
        text = fs.read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        raise TagFileError(path, f"Unable to read: {e}") from e

    rows = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        # Blank lines are not rows
        if not line.strip():
            continue
        try:
            rows.append(parse(line))
        except TagFormatError as e:
            raise TagFileError(path, str(e), line_number) from e
    return rows


def read_tags(root: Path, fs: Optional[FileSystem] = None) -> List[Tagging]:
    """
    Read tag entries from every .csv file in root/tags/all.

    Raises:
        TagFileError: If the directory or any file cannot be read or parsed
    """
    fs = fs or FileSystem()
    tag_dir = Path(root) / TAGS_DIR
    try:
        entries = fs.list_dir(tag_dir)
    except OSError as e:
        raise TagFileError(tag_dir, f"Unable to read tag directory: {e}") from e

    tags = []
    for path in entries:
        if path.suffix != ".csv":
            continue
        tags.extend(_read_rows(path, fs, Tagging.parse))
    return tags


def read_tag_metadata(root: Path, fs: Optional[FileSystem] = None) -> List[TagMetadata]:
    """
    Read tag metadata from root/tags/tags_metadata.csv.

    Raises:
        TagFileError: If the file cannot be read or parsed
    """
    fs = fs or FileSystem()
    return _read_rows(Path(root) / TAG_METADATA_FILE, fs, TagMetadata.parse)


class GoogleFonts:
    """
    A view into the Google Fonts library.

    Holds the path to a local checkout of the Google Fonts repository and
    provides cached, read-only accessors for families, tags and languages.
    Construction performs no I/O; each view is computed on first access and
    kept for the lifetime of the instance. A changed checkout is only seen
    by a new instance.

    Example:
        gf = GoogleFonts("~/oss/fonts", family_filter="ofl/roboto")
        for entry in gf.families():
            print(entry)
    """

    def __init__(
        self,
        repo_dir: Union[str, Path],
        family_filter: Optional[Union[str, Pattern]] = None,
        languages: Optional[Mapping[str, LanguageProto]] = None,
        fs: Optional[FileSystem] = None,
    ):
        """
        Initialize GoogleFonts.

        Args:
            repo_dir: Root of the fonts repository checkout (the directory
                containing the family directories and tags/)
            family_filter: Regex; only METADATA.pb files whose path matches
                are exposed by families()
            languages: Language table keyed by id (loads the gflanguages
                table on first use if None)
            fs: File system to use (creates default if None)
        """
        self.repo_dir = Path(repo_dir).expanduser()
        if isinstance(family_filter, str):
            family_filter = re.compile(family_filter)
        self.family_filter = family_filter
        self.fs = fs or FileSystem()

        self._languages = languages
        self._families: Optional[List[FamilyEntry]] = None
        self._family_by_font_file: Optional[Dict[str, int]] = None
        self._tags: Union[None, List[Tagging], TagFileError] = None
        self._tag_metadata: Union[None, List[TagMetadata], TagFileError] = None

    # =========================================================================
    # FAMILIES
    # =========================================================================

    def families(self) -> List[FamilyEntry]:
        """
        Return the discovered families and their parse outcomes.

        The repository is scanned on first call only. Entries are in
        discovery order; unparseable families have ``error`` set.
        """
        if self._families is None:
            self._families = list(iter_families(self.repo_dir, self.family_filter, self.fs))
        return self._families

    def _family_index(self) -> Dict[str, int]:
        if self._family_by_font_file is None:
            index: Dict[str, int] = {}
            for i, entry in enumerate(self.families()):
                if not entry.ok:
                    continue
                for font in entry.family.fonts:
                    previous = index.get(font.filename)
                    if previous is not None and previous != i:
                        logger.warning(
                            f"{font.filename} is listed by both "
                            f"{self._families[previous].path} and {entry.path}, "
                            f"using {entry.path}"
                        )
                    index[font.filename] = i
            self._family_by_font_file = index
        return self._family_by_font_file

    def family(self, font: FontProto) -> Optional[Tuple[Path, FamilyProto]]:
        """
        Given a font, return the family it belongs to.

        Fonts are matched by filename against successfully parsed families.

        Returns:
            (path to METADATA.pb, family), or None if the font is unknown
        """
        entry = self._entry_for_font(font)
        if entry is None:
            return None
        return entry.path, entry.family

    def _entry_for_font(self, font: FontProto) -> Optional[FamilyEntry]:
        i = self._family_index().get(font.filename)
        if i is None:
            return None
        return self.families()[i]

    def family_by_name(self, name: str) -> Optional[FamilyProto]:
        """Return the first parsed family with the given name."""
        for entry in self.families():
            if entry.ok and entry.family.name == name:
                return entry.family
        return None

    def find_font_binary(self, font: FontProto) -> Optional[Path]:
        """
        Find the path to the font binary for a font.

        The binary is expected next to its family's METADATA.pb.

        Returns:
            Path to the font file, or None if the family is unknown or the
            file does not exist
        """
        entry = self._entry_for_font(font)
        if entry is None:
            return None
        font_file = entry.directory / font.filename
        if not self.fs.exists(font_file):
            logger.warning(f"No such file as {font_file}")
            return None
        return font_file

    def select_font(
        self,
        family: FamilyProto,
        preferred_style: FontStyle = FontStyle.NORMAL,
        preferred_weight: int = 400,
    ) -> Optional[FontProto]:
        """Select the best matching font from a family."""
        return select_font(family, preferred_style, preferred_weight)

    def exemplar(self, family: FamilyProto) -> Optional[FontProto]:
        """Pick the exemplar font of a family."""
        return exemplar(family)

    # =========================================================================
    # LANGUAGES
    # =========================================================================

    def _language_table(self) -> Mapping[str, LanguageProto]:
        if self._languages is None:
            self._languages = load_languages()
        return self._languages

    def languages(self) -> Iterator[LanguageProto]:
        """Iterate over all known languages."""
        return iter(self._language_table().values())

    def language(self, lang_id: str) -> Optional[LanguageProto]:
        """
        Lookup a language by its identifier (e.g., "en_Latn").

        Returns:
            The language, or None if it is not known
        """
        return self._language_table().get(lang_id)

    def primary_language(self, family: FamilyProto) -> LanguageProto:
        """
        Our best guess at the primary language for a family.

        See gffonts_index.languages.primary_language for the heuristic.
        """
        return primary_language(family, self._language_table())

    # =========================================================================
    # TAGS
    # =========================================================================

    def tags(self) -> List[Tagging]:
        """
        Return the tag entries from tags/all/*.csv.

        Files are read on first call only. A failure is kept and the same
        error is raised again, with a fresh traceback, on every later call.

        Raises:
            TagFileError: If any tag file could not be read or parsed
        """
        if self._tags is None:
            try:
                self._tags = read_tags(self.repo_dir, self.fs)
            except TagFileError as e:
                self._tags = e
        if isinstance(self._tags, TagFileError):
            raise self._tags.with_traceback(None)
        return self._tags

    def tag_metadata(self) -> List[TagMetadata]:
        """
        Return tag metadata (ranges and prompt names) from
        tags/tags_metadata.csv.

        Read on first call only; a failure is kept and raised again.

        Raises:
            TagFileError: If the file could not be read or parsed
        """
        if self._tag_metadata is None:
            try:
                self._tag_metadata = read_tag_metadata(self.repo_dir, self.fs)
            except TagFileError as e:
                self._tag_metadata = e
        if isinstance(self._tag_metadata, TagFileError):
            raise self._tag_metadata.with_traceback(None)
        return self._tag_metadata

    def family_tags(self, name: str, location: Optional[str] = None) -> List[Tagging]:
        """
        Return tag entries for a family.

        Args:
            name: Family name
            location: Only entries for this location ("" for family-wide)
        """
        return filter_taggings(self.tags(), name, location)

    def tag_definition(self, tag: str) -> Optional[TagMetadata]:
        """Return the metadata for a tag name, if defined."""
        for metadata in self.tag_metadata():
            if metadata.tag == tag:
                return metadata
        return None


def create(
    repo_dir: Optional[Union[str, Path]] = None,
    family_filter: Optional[str] = None,
    config: Optional[Dict] = None,
    **kwargs
) -> GoogleFonts:
    """
    Create a GoogleFonts instance.

    Explicit arguments win over configuration; configuration is loaded
    from file if not given.

    Args:
        repo_dir: Repository root
        family_filter: Regex filter for METADATA.pb paths
        config: Full config dict
        **kwargs: Additional arguments passed to GoogleFonts

    Returns:
        Configured GoogleFonts instance
    """
    if config is None:
        from .config import load_config
        config = load_config()
    general = config.get("general", {})
    repo_dir = repo_dir or general.get("repository_directory")
    family_filter = family_filter or general.get("family_filter") or None
    return GoogleFonts(repo_dir, family_filter=family_filter, **kwargs)
