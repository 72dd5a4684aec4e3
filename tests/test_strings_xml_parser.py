"""Tests for strings.xml scraping"""

import pytest

from string_source_map.errors import ResourceFileParseError
from string_source_map.parser.strings_xml_parser import scrape_resource_names


def test_scrapes_all_three_kinds(project):
    d = project.res_dir(
        "res",
        '<string name="app_name">Foo</string>',
        '<plurals name="n_items"><item quantity="one">1 item</item></plurals>',
        '<string-array name="planets"><item>Mercury</item></string-array>',
        '<color name="primary">#ff0000</color>',
    )
    names = scrape_resource_names(project.root / d / "values" / "strings.xml")
    assert sorted(names) == ["app_name", "n_items", "planets"]


def test_string_array_items_are_not_names(project):
    d = project.res_dir(
        "res",
        '<string-array name="planets"><item>Mercury</item><item>Venus</item></string-array>',
    )
    assert scrape_resource_names(project.root / d / "values" / "strings.xml") == ["planets"]


def test_malformed_xml_raises(project):
    d = project.res_dir("res", raw="<resources><string name='a'>oops</resources>")
    with pytest.raises(ResourceFileParseError):
        scrape_resource_names(project.root / d / "values" / "strings.xml")


def test_missing_name_attribute_raises(project):
    d = project.res_dir("res", '<string name="a">A</string>', "<string>no name</string>")
    with pytest.raises(ResourceFileParseError) as exc:
        scrape_resource_names(project.root / d / "values" / "strings.xml")
    assert "name attribute" in str(exc.value)
