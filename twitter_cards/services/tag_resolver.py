"""Field lookup over a document's meta tags"""

import dataclasses
import logging
import re
from typing import Any, Dict, Optional, Sequence, Union

from twitter_cards.models.card_model import AppStoreData, ValueOrId
from .exceptions import MissingRequiredFieldError
from .models import ResolveOptions, TagCollection


logger = logging.getLogger(__name__)

PRIMARY_NAMESPACE = "twitter"
NO_OPTIONS = ResolveOptions()

_PATH_SEPARATOR_RE = re.compile(r"[:.]")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

Scalar = Union[str, int, float, bool]


def qualify(namespace: str, field_name: str) -> str:
    return f"{namespace}:{field_name}"


def resolve_field(
    tags: TagCollection,
    field_name: str,
    options: ResolveOptions = NO_OPTIONS,
) -> Optional[ValueOrId]:
    """
    Look up a single card field.

    Resolution order: twitter:<field>, then the fallback namespace, then
    twitter:<field>:id as an identifier. Only the first matching tag in
    document order is used.

    Args:
        tags: Meta tags of the document
        field_name: Field name inside the twitter namespace (e.g. "site", "image:alt")
        options: Lookup policy for this field

    Returns:
        ValueOrId with either value or id set, or None when the field is absent

    Raises:
        MissingRequiredFieldError: If options.required is set and nothing was found
    """
    tag = tags.find(qualify(PRIMARY_NAMESPACE, field_name))

    if tag is None and options.fallback_namespace:
        fallback_key = qualify(options.fallback_namespace, options.fallback_field or field_name)
        tag = tags.find(fallback_key)

    if tag is None and options.allow_identifier_form:
        id_tag = tags.find(qualify(PRIMARY_NAMESPACE, f"{field_name}:id"))
        if id_tag is not None:
            return ValueOrId(id=id_tag.text)

    if tag is None:
        if options.required:
            raise MissingRequiredFieldError(qualify(PRIMARY_NAMESPACE, field_name))
        return None

    return ValueOrId(value=tag.text)


def resolve_scalar(
    tags: TagCollection,
    field_name: str,
    options: ResolveOptions = NO_OPTIONS,
) -> Optional[str]:
    """Look up a field as plain text, ignoring the identifier form"""
    if options.allow_identifier_form:
        options = dataclasses.replace(options, allow_identifier_form=False)
    resolved = resolve_field(tags, field_name, options)
    return resolved.value if resolved else None


def resolve_fixed_key_set(
    tags: TagCollection,
    keys: Sequence[str],
    prefix: str,
    required: bool = False,
) -> Optional[AppStoreData]:
    """
    Look up twitter:<prefix>:<key> for each of a fixed list of keys.

    Absent keys are left out of the mapping. The required check only
    fails when every key is absent.

    Raises:
        MissingRequiredFieldError: If required and none of the keys exist
    """
    found: Dict[str, str] = {}
    for key in keys:
        value = resolve_scalar(tags, f"{prefix}:{key}")
        if value is not None:
            found[key] = value

    if not found:
        if required:
            qualified = qualify(PRIMARY_NAMESPACE, prefix)
            raise MissingRequiredFieldError(
                qualified,
                f"At least one of {', '.join(keys)} under '{qualified}' should exist but found nothing",
            )
        return None
    return found


def coerce_scalar(text: str) -> Scalar:
    """Turn tag text into a bool, int, float or trimmed string"""
    text = text.strip()
    if text == "true":
        return True
    if text == "false":
        return False
    if _INTEGER_RE.match(text):
        return int(text)
    if _DECIMAL_RE.match(text):
        return float(text)
    return text


def flatten_namespace(tags: TagCollection, namespace_prefix: str = "twitter:") -> Dict[str, Any]:
    """
    Rebuild a nested dict from every tag under a namespace prefix.

    "twitter:text:event_id" becomes {"text": {"event_id": ...}}. When the
    same path is used both as a leaf and as a namespace, the leaf value is
    kept under a "value" key of the namespace dict, whichever comes first.
    """
    tree: Dict[str, Any] = {}
    for tag in tags:
        key = tag.key_with_prefix(namespace_prefix)
        if key is None:
            continue
        segments = [segment for segment in _PATH_SEPARATOR_RE.split(key[len(namespace_prefix):]) if segment]
        if not segments:
            continue

        node = tree
        for segment in segments[:-1]:
            child = node.get(segment)
            if child is None:
                child = node[segment] = {}
            elif not isinstance(child, dict):
                # Leaf already stored here: demote it
                child = node[segment] = {"value": child}
            node = child

        leaf = segments[-1]
        existing = node.get(leaf)
        if isinstance(existing, dict):
            existing.setdefault("value", coerce_scalar(tag.content))
        elif leaf not in node:
            node[leaf] = coerce_scalar(tag.content)
        else:
            logger.debug(f"Ignoring duplicate tag '{key}'")

    return tree
