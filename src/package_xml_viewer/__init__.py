"""
Salesforce package.xml viewer package.
"""

__version__ = "1.0.0"

from package_xml_viewer.config_models import ViewerConfig
from package_xml_viewer.exceptions import (
    FileReadError,
    InvalidOptionError,
    MalformedXmlError,
    MissingTypeNameError,
    ParseError,
    RenderError,
    RenderIoError,
    ViewerError,
)
from package_xml_viewer.models import Component, Manifest, OutputFormat, SortPolicy
from package_xml_viewer.parsers import parse_manifest
from package_xml_viewer.pipeline import view_file, view_manifest
from package_xml_viewer.renderers import render
from package_xml_viewer.sorting import sort_components
from package_xml_viewer.splitting import split_parents

__all__ = [
    "Component",
    "Manifest",
    "OutputFormat",
    "SortPolicy",
    "ViewerConfig",
    "parse_manifest",
    "sort_components",
    "split_parents",
    "render",
    "view_manifest",
    "view_file",
    "ViewerError",
    "FileReadError",
    "ParseError",
    "MalformedXmlError",
    "MissingTypeNameError",
    "InvalidOptionError",
    "RenderError",
    "RenderIoError",
]
