# string_source_map/main.py
import argparse
import logging
import sys

from .errors import IdentifierTableNotFound, IdentifierTableParseError, OutputWriteError
from .generator.json_writer import write_string_source_map
from .generator.source_map import build_string_source_map
from .parser.rtxt_parser import load_resource_ids
from .utils import resolve_against

logger = logging.getLogger(__name__)

STEP_NAME = "build_string_source_map"


def run(r_dot_java_dir, res_dirs, destination_dir, project_root=None) -> int:
    """
    Generates <destination_dir>/strings.json from <r_dot_java_dir>/R.txt and
    the values/strings.xml of each resource directory.

    res_dirs: same directories, same order, that were passed to aapt.
    Returns 0 on success, 1 on failure.
    """
    r_txt_path = resolve_against(r_dot_java_dir, project_root) / "R.txt"
    try:
        resource_ids = load_resource_ids(r_txt_path)
    except IdentifierTableNotFound as e:
        logger.error("%s: %s", STEP_NAME, e)
        return 1
    except IdentifierTableParseError as e:
        logger.error("%s: Failure parsing R.txt file. %s", STEP_NAME, e)
        return 1

    source_map = build_string_source_map(resource_ids, res_dirs, project_root=project_root)

    try:
        write_string_source_map(source_map, resolve_against(destination_dir, project_root))
    except OutputWriteError as e:
        logger.error("%s: %s", STEP_NAME, e)
        return 1

    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="python -m string_source_map.main",
        description=(
            "Map each Android <string>, <plurals> and <string-array> resource to its\n"
            "aapt id (from R.txt) and the first strings.xml that defines it."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--r-dot-java-dir", dest="r_dot_java_dir", required=True,
                        help="Directory containing the R.txt written by aapt")
    parser.add_argument("--res-dir", dest="res_dirs", action="extend", nargs="+", required=True,
                        help="Resource directory, in aapt order (repeatable; first one wins)")
    parser.add_argument("--out", required=True, help="Directory where strings.json is written")
    parser.add_argument("--project-root", dest="project_root",
                        help="Base directory for relative paths (default: current directory)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    print(f"[CONFIG] r_dot_java_dir= {args.r_dot_java_dir}")
    print(f"[CONFIG] res_dirs= {', '.join(args.res_dirs)}")
    print(f"[CONFIG] out= {args.out}")
    print(f"[CONFIG] project_root= {args.project_root or '<cwd>'}")

    sys.exit(run(args.r_dot_java_dir, args.res_dirs, args.out, args.project_root))


if __name__ == "__main__":
    main()
