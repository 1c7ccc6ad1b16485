"""Privacy declaration: the payments report stores no personal data."""

from dataclasses import dataclass, field

COMPONENT = "report_payments"


@dataclass
class MetadataCollection:
    """Personal data items a component declares it stores."""

    component: str
    items: list[str] = field(default_factory=list)


class Provider:
    """Null provider: reports on existing payment data and keeps none of its own."""

    component = COMPONENT

    @staticmethod
    def get_reason(collection: MetadataCollection | None = None) -> str:
        """String identifier, in this component, explaining why nothing is stored."""
        return "privacy:metadata"

    @staticmethod
    def get_metadata(collection: MetadataCollection) -> MetadataCollection:
        return collection
