# string_source_map/utils.py
from pathlib import Path

MAX_RESOURCE_ID = 0xFFFFFFFF


def format_resource_id(resource_id: int) -> str:
    """ 0x7f080001 -> '0x7F080001' (always 8 upper-case hex digits) """
    return "0x%08X" % resource_id


def strings_xml_path(res_dir) -> Path:
    return Path(res_dir) / "values" / "strings.xml"


def resolve_against(path, project_root=None) -> Path:
    """
    Relative paths are read from project_root (cwd when None).
    Absolute paths are returned unchanged.
    """
    p = Path(path)
    if project_root is None or p.is_absolute():
        return p
    return Path(project_root) / p
