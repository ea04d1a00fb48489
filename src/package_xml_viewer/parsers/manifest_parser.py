"""
package.xml manifest parser module.
"""

import logging
from typing import List, Optional, Union

from lxml import etree

from package_xml_viewer.exceptions import MalformedXmlError, MissingTypeNameError
from package_xml_viewer.models import Component, Manifest

logger = logging.getLogger(__name__)

METADATA_NAMESPACE = "http://soap.sforce.com/2006/04/metadata"
ROOT_TAG = "Package"


def _make_parser(encoding: Optional[str] = None) -> etree.XMLParser:
    """Build a strict XML parser with entity expansion and network access disabled."""
    return etree.XMLParser(
        encoding=encoding,
        recover=False,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def _local_name(elem: etree._Element) -> Optional[str]:
    """Return the tag without its namespace, or None for non-element nodes."""
    if not isinstance(elem.tag, str):
        return None
    return etree.QName(elem).localname


def _text(elem: etree._Element) -> str:
    return (elem.text or "").strip()


class _TypesBlock:
    """Accumulates one <types> element: members in order plus its type name.

    The manifest schema does not enforce where <name> sits relative to the
    <members> elements, so the block is collected as a whole and resolved once
    the element has been fully read.
    """

    def __init__(self, index: int, line: Optional[int]):
        self.index = index
        self.line = line
        self.members: List[str] = []
        self.name: Optional[str] = None

    def add(self, child: etree._Element) -> None:
        tag = _local_name(child)
        if tag == "members":
            self.members.append(_text(child))
        elif tag == "name":
            if self.name is None:
                self.name = _text(child)
            else:
                logger.warning(
                    f"<types> block #{self.index} has more than one <name>; "
                    f"keeping '{self.name}', ignoring '{_text(child)}'"
                )
        elif tag is not None:
            logger.debug(f"Ignoring unexpected <{tag}> in <types> block #{self.index}")

    def resolve(self) -> List[Component]:
        """Pair every collected member with the block's type name.

        Raises:
            MissingTypeNameError: If the block had no (or a blank) <name>
        """
        if not self.name:
            raise MissingTypeNameError(self.index, self.line)
        return [Component(type_name=self.name, member_name=m) for m in self.members]


def _check_root(root: etree._Element) -> Optional[str]:
    """Warn about an unexpected root tag or namespace. Never rejects the document."""
    qname = etree.QName(root)
    if qname.localname != ROOT_TAG:
        logger.warning(f"Root element is <{qname.localname}>, expected <{ROOT_TAG}>; parsing anyway")
    namespace = qname.namespace
    if namespace is None:
        logger.warning(f"Manifest root has no namespace (expected {METADATA_NAMESPACE})")
    elif namespace != METADATA_NAMESPACE:
        logger.warning(f"Manifest namespace is {namespace}, expected {METADATA_NAMESPACE}")
    return namespace


def parse_manifest(xml_text: Union[str, bytes]) -> Manifest:
    """Parse package.xml content into an ordered component list.

    Args:
        xml_text: Manifest content. ``str`` input is always treated as UTF-8,
                  ``bytes`` input honours the XML declaration's encoding.

    Returns:
        Manifest with components in document order (types blocks in order,
        members in order within each block) and the optional <version> text

    Raises:
        MalformedXmlError: If the content is not well-formed XML
        MissingTypeNameError: If a <types> block has no <name>
    """
    if isinstance(xml_text, str):
        data = xml_text.encode("utf-8")
        parser = _make_parser(encoding="utf-8")
    else:
        data = xml_text
        parser = _make_parser()

    if not data.strip():
        raise MalformedXmlError("document is empty", line=1, column=1)

    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        line, column = e.position if e.position else (None, None)
        raise MalformedXmlError(e.msg or str(e), line=line, column=column) from e

    namespace = _check_root(root)

    components: List[Component] = []
    version: Optional[str] = None
    block_count = 0

    for child in root:
        tag = _local_name(child)
        if tag == "types":
            block_count += 1
            block = _TypesBlock(block_count, child.sourceline)
            for grandchild in child:
                block.add(grandchild)
            components.extend(block.resolve())
        elif tag == "version":
            version = _text(child) or None
        elif tag is not None:
            logger.debug(f"Ignoring unexpected root-level <{tag}>")

    logger.debug(
        f"Parsed {len(components)} components from {block_count} <types> blocks"
        + (f" (API version {version})" if version else "")
    )
    return Manifest(components=components, version=version, namespace=namespace)
