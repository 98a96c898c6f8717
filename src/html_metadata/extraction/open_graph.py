"""
OpenGraph protocol parser.

OpenGraph tags are read in document order with two pieces of state:

- the namespace: prefixes accepted as OpenGraph ("og", "fb"), extended
  by every og:type declaration so that e.g. og:type=video.movie enables
  video:director, video:actor, ... for the tags that follow it;
- the roots: the most recent image/video/audio object, which trailing
  structured properties such as og:image:width attach to.

Tags using a vertical prefix before its og:type declaration are ignored,
as the protocol requires type to come first.
"""

from dataclasses import dataclass, field

from html_metadata.core.exceptions import NotFoundError
from html_metadata.extraction.document import Document, require_document
from html_metadata.extraction.values import MetadataMap, lower_value, merge_property
from html_metadata.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_NAMESPACE = ("og", "fb")

# Grouped properties and the sub-field their bare tag value is stored under
GROUPED_PROPERTIES = {
    "image": "url",
    "video": "url",
    "audio": "url",
}

# Structured sub-fields whose values are case-sensitive
_URL_SUB_FIELDS = frozenset({"url", "secure_url"})

_NOT_FOUND = "No openGraph metadata found in page"


@dataclass
class OpenGraphState:
    """Per-call parsing state; never shared between parses."""

    namespace: list[str] = field(default_factory=lambda: list(DEFAULT_NAMESPACE))
    roots: dict[str, dict[str, str]] = field(default_factory=dict)
    meta: MetadataMap = field(default_factory=dict)

    def accepts(self, prefix: str) -> bool:
        return prefix in self.namespace

    def declare_type(self, content: str) -> None:
        """Enable the vertical named by an og:type value ("video.movie" -> "video")."""
        vertical = content.split(".", 1)[0].lower()
        if vertical and vertical not in self.namespace:
            self.namespace.append(vertical)


def _process_tag(state: OpenGraphState, property_value: str, content: str) -> None:
    """Apply a single property/content pair to the parse state."""
    parts = property_value.lower().split(":")

    if not state.accepts(parts[0]):
        return

    if len(parts) == 2:
        prop = parts[1]
        default_key = GROUPED_PROPERTIES.get(prop)
        if default_key is not None:
            node = {default_key: content}
            state.roots[prop] = node
            merge_property(state.meta, prop, node)
        else:
            merge_property(state.meta, prop, content)

        if prop == "type":
            state.declare_type(content)

    elif len(parts) == 3:
        group, sub_field = parts[1], parts[2]
        root = state.roots.get(group)
        if root is None or sub_field in root:
            return
        root[sub_field] = content if sub_field in _URL_SUB_FIELDS else content.lower()

    else:
        logger.debug(f"Discarding malformed OpenGraph property {property_value!r}")


def parse_open_graph(document: Document) -> MetadataMap:
    """
    Scrape OpenGraph metadata.

    Args:
        document: Document to scrape

    Returns:
        Mapping of OpenGraph property to value. image, video and audio
        become objects ({"url": ..., "width": ...}) and repeated
        properties become lists.

    Raises:
        InvalidArgumentError: document is None
        NotFoundError: No OpenGraph tags were found
    """
    document = require_document(document)
    meta_tags = document.query("meta")
    if not meta_tags:
        raise NotFoundError(_NOT_FOUND, format_key="openGraph")

    state = OpenGraphState()
    for element in meta_tags:
        property_value = element.attr("property")
        content = element.attr("content")
        if not property_value or not content:
            continue
        _process_tag(state, property_value, content)

    meta = state.meta
    if not meta:
        raise NotFoundError(_NOT_FOUND, format_key="openGraph")

    if "type" in meta:
        meta["type"] = lower_value(meta["type"])

    return meta
