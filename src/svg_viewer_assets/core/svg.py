"""SVG parsing for asset normalization.

Splits an optimized SVG document into the attributes of its root <svg>
tag and the markup nested inside it.
"""

from lxml import etree

from .errors import MalformedSvgError
from .types import SvgData

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


def _root_attrs(root: etree._Element) -> dict[str, str]:
    """Collect root attributes the way they are written in the document.

    Namespace declarations come first (``xmlns``, ``xmlns:xlink``), followed
    by the regular attributes, with namespaced ones written as
    ``prefix:name``.
    """
    attrs: dict[str, str] = {}
    prefixes = {XML_NAMESPACE: "xml"}

    for prefix, uri in root.nsmap.items():
        attrs["xmlns" if prefix is None else f"xmlns:{prefix}"] = uri
        if prefix is not None:
            prefixes[uri] = prefix

    for name, value in root.attrib.items():
        qname = etree.QName(name)
        if qname.namespace:
            prefix = prefixes.get(qname.namespace)
            name = f"{prefix}:{qname.localname}" if prefix else qname.localname
        attrs[name] = value

    return attrs


def _inner_markup(root: etree._Element) -> str:
    """Return the markup between the root's start and end tags.

    The root is serialized as a whole so namespace declarations stay on
    the root tag instead of being repeated on every child.
    """
    if len(root) == 0 and not root.text:
        return ""

    markup = etree.tostring(root, encoding="unicode", with_tail=False)
    # Attribute values escape ">", so the first one closes the start tag
    start = markup.index(">") + 1
    end = markup.rindex("</")
    return markup[start:end]


def parse_svg(content: str, relative_path: str = "<string>") -> SvgData:
    """Parse optimized SVG markup into SvgData.

    Args:
        content: Full text of the SVG document
        relative_path: Path used in error messages

    Returns:
        SvgData with the root tag's attributes and inner markup

    Raises:
        MalformedSvgError: If the content isn't XML or its root isn't <svg>
    """
    try:
        root = etree.fromstring(content.encode("utf-8"), _make_parser())
    except etree.XMLSyntaxError as e:
        raise MalformedSvgError(relative_path, str(e)) from e

    if etree.QName(root).localname != "svg":
        raise MalformedSvgError(
            relative_path, f"root element is <{etree.QName(root).localname}>, expected <svg>"
        )

    attrs = _root_attrs(root)
    return SvgData(content=_inner_markup(root), attrs=attrs)
