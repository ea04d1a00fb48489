"""
Parser modules for manifest files.
"""

from package_xml_viewer.parsers.manifest_parser import METADATA_NAMESPACE, parse_manifest

__all__ = [
    "parse_manifest",
    "METADATA_NAMESPACE",
]
