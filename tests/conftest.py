"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from package_xml_viewer.models import Component


SAMPLE_MANIFEST = """<?xml version="1.0" encoding="UTF-8"?>
<Package xmlns="http://soap.sforce.com/2006/04/metadata">
    <types>
        <members>AccountHandler</members>
        <members>ContactService</members>
        <name>ApexClass</name>
    </types>
    <types>
        <members>AccountTrigger</members>
        <name>ApexTrigger</name>
    </types>
    <version>60.0</version>
</Package>
"""

UNSORTED_MANIFEST = """<?xml version="1.0" encoding="UTF-8"?>
<Package xmlns="http://soap.sforce.com/2006/04/metadata">
    <types>
        <members>Account</members>
        <name>CustomObject</name>
    </types>
    <types>
        <members>Zebra</members>
        <members>Alpha</members>
        <members>Middle</members>
        <name>ApexClass</name>
    </types>
    <version>59.0</version>
</Package>
"""


@pytest.fixture
def sample_manifest() -> str:
    """Two types, three members, already in sorted order."""
    return SAMPLE_MANIFEST


@pytest.fixture
def unsorted_manifest() -> str:
    """Types and members out of alphabetical order."""
    return UNSORTED_MANIFEST


@pytest.fixture
def sample_manifest_file(tmp_path) -> Path:
    """Write the sample manifest to disk."""
    xml_file = tmp_path / "package.xml"
    xml_file.write_text(SAMPLE_MANIFEST, encoding="utf-8")
    return xml_file


@pytest.fixture
def unsorted_manifest_file(tmp_path) -> Path:
    """Write the unsorted manifest to disk."""
    xml_file = tmp_path / "unsorted.xml"
    xml_file.write_text(UNSORTED_MANIFEST, encoding="utf-8")
    return xml_file


@pytest.fixture
def malformed_manifest_file(tmp_path) -> Path:
    """Create a malformed manifest file for error testing."""
    xml_content = """<?xml version="1.0" encoding="UTF-8"?>
<Package xmlns="http://soap.sforce.com/2006/04/metadata">
    <types>
        <members>AccountHandler</members>
        <name>ApexClass</name>
    </types
</Package>
"""  # Missing closing bracket on types tag
    xml_file = tmp_path / "malformed.xml"
    xml_file.write_text(xml_content, encoding="utf-8")
    return xml_file


@pytest.fixture
def sample_components() -> list:
    """Components of the sample manifest in document order."""
    return [
        Component("ApexClass", "AccountHandler"),
        Component("ApexClass", "ContactService"),
        Component("ApexTrigger", "AccountTrigger"),
    ]
