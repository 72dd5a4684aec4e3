# string_source_map/parser/strings_xml_parser.py
from typing import List

from lxml import etree

from ..errors import ResourceFileParseError

# the element kinds that end up in R.txt as string / plurals / array
STRING_RESOURCE_TAGS = ("string", "plurals", "string-array")


def scrape_resource_names(xml_path) -> List[str]:
    """
    values/strings.xml -> resource names of every <string>, <plurals> and
    <string-array> element, grouped by tag in the order above.

    The whole file fails (ResourceFileParseError) if the XML is malformed or
    any of those elements has no name attribute.
    """
    try:
        with open(xml_path, "rb") as f:
            tree = etree.parse(f)
    except (OSError, etree.XMLSyntaxError) as e:
        raise ResourceFileParseError(f"Failed to parse strings file: '{xml_path}': {e}", xml_path) from e

    names = []
    for tag in STRING_RESOURCE_TAGS:
        for el in tree.iter(tag):
            name = el.get("name")
            if name is None:
                raise ResourceFileParseError(
                    f"<{tag}> without a name attribute at line {el.sourceline} of '{xml_path}'",
                    xml_path,
                )
            names.append(name)
    return names
