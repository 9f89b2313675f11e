from dataclasses import dataclass, field


@dataclass
class Thing:
    """Value resolved by a thing service. Opaque to the cache."""

    id: str
    attributes: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class Found:
    """Lookup resolved the key."""

    value: Thing


@dataclass(frozen=True)
class NotFound:
    """Lookup did not resolve the key."""

    key: str


LookupResult = Found | NotFound
