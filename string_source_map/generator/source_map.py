# string_source_map/generator/source_map.py
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from ..errors import ResourceFileParseError
from ..parser.strings_xml_parser import scrape_resource_names
from ..utils import format_resource_id, resolve_against, strings_xml_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceEntry:
    """One string resource: its aapt id and the strings.xml that defined it first."""

    resource_id: int
    strings_xml_path: str

    @property
    def android_resource_id(self) -> str:
        return format_resource_id(self.resource_id)

    def to_json(self) -> Dict[str, str]:
        return {
            "androidResourceId": self.android_resource_id,
            "stringsXmlPath": self.strings_xml_path,
        }


# ---------- Public API ----------
def build_string_source_map(
    resource_ids: Mapping[str, int],
    res_dirs: Iterable,
    project_root=None,
    problems: Optional[List[str]] = None,
) -> Dict[str, ResourceEntry]:
    """
    Associates each string resource with its aapt id and the first strings.xml
    (in res_dirs order) that defines it.

    res_dirs must be in the same order that was given to aapt. Names missing
    from resource_ids are dropped. A strings.xml that cannot be read or parsed
    is logged, appended to `problems` when given, and contributes nothing.
    """
    source_map: Dict[str, ResourceEntry] = {}

    for res_dir in res_dirs:
        rel_path = strings_xml_path(res_dir)
        xml_file = resolve_against(rel_path, project_root)
        try:
            if not xml_file.exists():
                logger.debug("No strings file in %s", res_dir)
                continue
            names = scrape_resource_names(xml_file)
        except ResourceFileParseError as e:
            _report(problems, str(e))
            continue
        except OSError as e:
            _report(problems, f"Failed to read strings file: '{xml_file}': {e}")
            continue

        added = _merge_names(source_map, names, resource_ids, rel_path.as_posix())
        logger.debug("%s: %d names, %d new", rel_path.as_posix(), len(names), added)

    return source_map


# ---------- Internal helpers ----------

def _report(problems, message: str):
    logger.warning("%s", message)
    if problems is not None:
        problems.append(message)


def _merge_names(source_map, names, resource_ids, origin: str) -> int:
    """Adds names not already in source_map. Returns how many were added."""
    added = 0
    for name in names:
        resource_id = resource_ids.get(name)
        if resource_id is None:
            continue
        if name in source_map:
            continue
        source_map[name] = ResourceEntry(resource_id, origin)
        added += 1
    return added
