"""
Orchestration logic for viewing a manifest.

This module contains the parse -> sort -> render pass plus the file reading and
output writing around it, independent of CLI concerns.
"""

import logging
from pathlib import Path
from typing import TextIO, Union

from package_xml_viewer.config_models import ViewerConfig
from package_xml_viewer.exceptions import FileReadError, RenderIoError
from package_xml_viewer.parsers import parse_manifest
from package_xml_viewer.renderers import render
from package_xml_viewer.sorting import sort_components
from package_xml_viewer.splitting import split_parents

logger = logging.getLogger(__name__)


def view_manifest(xml_text: Union[str, bytes], config: ViewerConfig) -> str:
    """Turn manifest content into formatted text.

    Nothing is rendered unless parsing succeeds for the whole document.

    Args:
        xml_text: package.xml content
        config: Output format, sort policy and parent splitting

    Returns:
        Rendered output, every line terminated by a newline

    Raises:
        ParseError: If the manifest cannot be parsed
    """
    manifest = parse_manifest(xml_text)
    logger.info(
        f"Manifest has {len(manifest.components)} components across "
        f"{len(manifest.type_names)} types"
    )

    components = manifest.components
    if config.split_parent:
        components = split_parents(components)

    components = sort_components(components, config.sort_policy)
    return render(components, config.output_format, show_parent=config.split_parent)


def read_manifest(path: Path) -> bytes:
    """Read a manifest file as raw bytes so the XML declaration decides the encoding.

    Raises:
        FileReadError: If the path is missing, is a directory or cannot be read
    """
    logger.debug(f"Reading manifest from {path}")
    try:
        return Path(path).read_bytes()
    except FileNotFoundError:
        raise FileReadError(path, "no such file") from None
    except IsADirectoryError:
        raise FileReadError(path, "is a directory") from None
    except PermissionError:
        raise FileReadError(path, "permission denied") from None
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e


def view_file(path: Path, config: ViewerConfig) -> str:
    """Read a manifest file and render it.

    Raises:
        FileReadError: If the file cannot be read
        ParseError: If the manifest cannot be parsed
    """
    return view_manifest(read_manifest(path), config)


def write_output(text: str, stream: TextIO) -> None:
    """Write rendered output and flush it.

    Raises:
        BrokenPipeError: If the reader went away; callers treat this as a normal stop
        RenderIoError: On any other write failure
    """
    try:
        stream.write(text)
        stream.flush()
    except BrokenPipeError:
        raise
    except OSError as e:
        raise RenderIoError(f"Error writing output: {e}") from e
