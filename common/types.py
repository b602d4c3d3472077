from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


JsonDict = Dict[str, Any]


def _expect_mapping(d: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(d, Mapping):
        raise ValueError(f"{where} must be a JSON object")
    return d


def _require_str(d: Mapping[str, Any], key: str, where: str) -> str:
    v = d.get(key)
    if not isinstance(v, str):
        raise ValueError(f"{where}.{key} must be a string")
    return v


def _optional_str(d: Mapping[str, Any], key: str, where: str) -> Optional[str]:
    v = d.get(key)
    if v is not None and not isinstance(v, str):
        raise ValueError(f"{where}.{key} must be a string or absent")
    return v


def _list_of(d: Mapping[str, Any], key: str, where: str) -> Optional[List[Any]]:
    v = d.get(key)
    if v is not None and not isinstance(v, list):
        raise ValueError(f"{where}.{key} must be a list")
    return v


@dataclass(slots=True)
class Creator:
    """
    Royalty split entry.

    Attributes:
        address: wallet address (base58 public key).
        share: percentage 0..100. Shares within one Property should add up
            to 100; this is not checked here.
    """
    address: str
    share: int

    def __post_init__(self) -> None:
        if isinstance(self.share, bool) or not isinstance(self.share, int):
            raise ValueError("creator share must be an integer")
        if not (0 <= self.share <= 100):
            raise ValueError("creator share must be within 0..100")

    def to_dict(self) -> JsonDict:
        return {"address": self.address, "share": self.share}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Creator":
        d = _expect_mapping(d, "creator")
        return cls(address=_require_str(d, "address", "creator"), share=d.get("share"))  # type: ignore[arg-type]


@dataclass(slots=True)
class Attribute:
    trait_type: str
    value: str

    def to_dict(self) -> JsonDict:
        return {"trait_type": self.trait_type, "value": self.value}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Attribute":
        d = _expect_mapping(d, "attribute")
        return cls(
            trait_type=_require_str(d, "trait_type", "attribute"),
            value=_require_str(d, "value", "attribute"),
        )


@dataclass(slots=True)
class FileAttr:
    """File entry; `file_type` goes over the wire as `type`, `cdn` only when true."""
    uri: str
    file_type: str
    cdn: bool = False

    def to_dict(self) -> JsonDict:
        d: JsonDict = {"uri": self.uri, "type": self.file_type}
        if self.cdn:
            d["cdn"] = True
        return d

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "FileAttr":
        d = _expect_mapping(d, "file")
        cdn = d.get("cdn", False)
        if cdn is None:
            cdn = False
        if not isinstance(cdn, bool):
            raise ValueError("file.cdn must be a boolean")
        return cls(
            uri=_require_str(d, "uri", "file"),
            file_type=_require_str(d, "type", "file"),
            cdn=cdn,
        )


@dataclass(slots=True)
class Property:
    files: List[FileAttr] = field(default_factory=list)
    creators: Optional[List[Creator]] = None
    category: Optional[str] = None

    def to_dict(self) -> JsonDict:
        d: JsonDict = {"files": [f.to_dict() for f in self.files]}
        if self.creators is not None:
            d["creators"] = [c.to_dict() for c in self.creators]
        if self.category is not None:
            d["category"] = self.category
        return d

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Property":
        d = _expect_mapping(d, "properties")
        files = _list_of(d, "files", "properties") or []
        creators = _list_of(d, "creators", "properties")
        return cls(
            files=[FileAttr.from_dict(f) for f in files],
            creators=None if creators is None else [Creator.from_dict(c) for c in creators],
            category=_optional_str(d, "category", "properties"),
        )


@dataclass(slots=True)
class Metadata:
    """
    NFT metadata document (Metaplex token-metadata JSON convention).

    Optional fields set to None are left out of `to_dict()` entirely rather
    than emitted as null. Key order follows field order.
    """
    name: str
    description: str
    image: str
    properties: Property
    symbol: Optional[str] = None
    animation_url: Optional[str] = None
    external_url: Optional[str] = None
    attributes: List[Attribute] = field(default_factory=list)

    def to_dict(self) -> JsonDict:
        d: JsonDict = {"name": self.name}
        if self.symbol is not None:
            d["symbol"] = self.symbol
        d["description"] = self.description
        d["image"] = self.image
        if self.animation_url is not None:
            d["animation_url"] = self.animation_url
        if self.external_url is not None:
            d["external_url"] = self.external_url
        d["attributes"] = [a.to_dict() for a in self.attributes]
        d["properties"] = self.properties.to_dict()
        return d

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Metadata":
        d = _expect_mapping(d, "metadata")
        props = _expect_mapping(d.get("properties"), "metadata.properties")
        attributes = _list_of(d, "attributes", "metadata") or []
        return cls(
            name=_require_str(d, "name", "metadata"),
            symbol=_optional_str(d, "symbol", "metadata"),
            description=_require_str(d, "description", "metadata"),
            image=_require_str(d, "image", "metadata"),
            animation_url=_optional_str(d, "animation_url", "metadata"),
            external_url=_optional_str(d, "external_url", "metadata"),
            attributes=[Attribute.from_dict(a) for a in attributes],
            properties=Property.from_dict(props),
        )
