# string_source_map/generator/json_writer.py
import json
import logging
from pathlib import Path
from typing import Mapping

from ..errors import OutputWriteError
from .source_map import ResourceEntry

logger = logging.getLogger(__name__)

OUTPUT_FILE_NAME = "strings.json"


def serialize_string_source_map(source_map: Mapping[str, ResourceEntry]) -> bytes:
    data = {name: entry.to_json() for name, entry in source_map.items()}
    text = json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)
    return (text + "\n").encode("utf-8")


def write_string_source_map(source_map: Mapping[str, ResourceEntry], destination_dir) -> Path:
    """
    Writes <destination_dir>/strings.json and returns its path.
    The directory must already exist. A failed write leaves any previous
    strings.json untouched.
    """
    out_path = Path(destination_dir) / OUTPUT_FILE_NAME
    tmp_path = out_path.with_name(OUTPUT_FILE_NAME + ".tmp")
    payload = serialize_string_source_map(source_map)
    try:
        tmp_path.write_bytes(payload)
        tmp_path.replace(out_path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise OutputWriteError(f"Failed when trying to save the output file: '{out_path}': {e}", out_path) from e
    logger.info("Wrote %d string resources to %s", len(source_map), out_path)
    return out_path
