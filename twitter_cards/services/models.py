import builtins
from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class MetaTag:
    """
    A single <meta> declaration as seen by the card parser
    """
    name: Optional[str] = None
    property: Optional[str] = None
    content: str = ""

    # The "property" field shadows the builtin inside the class body
    @builtins.property
    def text(self) -> str:
        """Content with surrounding whitespace removed"""
        return self.content.strip()

    def matches(self, key: str) -> bool:
        return self.name == key or self.property == key

    def key_with_prefix(self, prefix: str) -> Optional[str]:
        """Return the name or property that lives under the given prefix"""
        for candidate in (self.name, self.property):
            if candidate and candidate.startswith(prefix):
                return candidate
        return None


@dataclass(frozen=True)
class TagCollection:
    """
    Meta declarations of a document in document order.

    Lookups always return the first declaration for a key; later
    declarations with the same name are ignored.
    """
    tags: List[MetaTag] = field(default_factory=list)

    def __iter__(self) -> Iterator[MetaTag]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def find(self, key: str) -> Optional[MetaTag]:
        for tag in self.tags:
            if tag.matches(key):
                return tag
        return None


@dataclass(frozen=True)
class ResolveOptions:
    """
    Lookup policy for a single card field.

    Attributes:
        fallback_namespace: Namespace retried when the twitter tag is absent (e.g. "og")
        fallback_field: Field name used in the fallback namespace, defaults to the twitter field name
        allow_identifier_form: Accept a sibling "<field>:id" tag as an identifier
        required: Raise MissingRequiredFieldError when nothing is found
    """
    fallback_namespace: Optional[str] = None
    fallback_field: Optional[str] = None
    allow_identifier_form: bool = False
    required: bool = False
