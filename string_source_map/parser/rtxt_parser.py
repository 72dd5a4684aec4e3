# string_source_map/parser/rtxt_parser.py
import re
from pathlib import Path
from typing import Dict

from ..errors import IdentifierTableNotFound, IdentifierTableParseError
from ..utils import MAX_RESOURCE_ID

# int string app_name 0x7f080001
# int[] styleable Foo { 0x7f010000, 0x7f010001 }
_RECORD = re.compile(r'^(int(?:\[\])?) (\w+) (\w+) (.+)$')
_HEX_VALUE = re.compile(r'^0x([0-9a-fA-F]+)$')

# resource types a strings.xml can define: <string>, <plurals>, <string-array>
STRING_RESOURCE_TYPES = ("string", "plurals", "array")


# ---------- Public API ----------
def load_resource_ids(r_txt_path) -> Dict[str, int]:
    """
    Reads an aapt R.txt file and returns {resource_name: resource_id} for the
    string, plurals and array records. Later records win over earlier ones.

    Raises IdentifierTableNotFound when the file is missing and
    IdentifierTableParseError when it cannot be read or a line is malformed.
    """
    path = Path(r_txt_path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise IdentifierTableNotFound(f"The '{path}' file is not present.", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise IdentifierTableParseError(f"Failure reading R.txt file '{path}': {e}", path) from e

    return parse_resource_ids(text, path)


def parse_resource_ids(text: str, path=None) -> Dict[str, int]:
    ids = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        m = _RECORD.match(line)
        if not m:
            raise IdentifierTableParseError(
                f"Unexpected line in R.txt ({path}:{lineno}): {line}", path)
        java_type, resource_type, name, value = m.groups()
        if java_type != "int" or resource_type not in STRING_RESOURCE_TYPES:
            continue
        ids[name] = _parse_id(value, path, lineno)
    return ids


# ---------- Internal helpers ----------

def _parse_id(value: str, path, lineno: int) -> int:
    m = _HEX_VALUE.match(value.strip())
    if not m:
        raise IdentifierTableParseError(
            f"Bad resource id '{value}' in R.txt ({path}:{lineno})", path)
    resource_id = int(m.group(1), 16)
    if resource_id > MAX_RESOURCE_ID:
        raise IdentifierTableParseError(
            f"Resource id '{value}' does not fit in 32 bits ({path}:{lineno})", path)
    return resource_id
