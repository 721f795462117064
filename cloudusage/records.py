"""Records decoded from the ONTAP REST API and the rows of a report."""

from dataclasses import dataclass


def _get(data: dict, *keys) -> str:
    """Walk nested keys, anything missing decodes as an empty string."""
    value = data
    for key in keys:
        if not isinstance(value, dict):
            return ""
        value = value.get(key)
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class RelationshipSummary:
    """A snapmirror relationship as listed by /snapmirror/relationships/."""

    uuid: str = ""
    destination_path: str = ""
    destination_uuid: str = ""

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            uuid=_get(data, "uuid"),
            destination_path=_get(data, "destination", "path"),
            destination_uuid=_get(data, "destination", "uuid"),
        )


@dataclass(frozen=True)
class RelationshipDetail:
    """A single snapmirror relationship fetched by uuid."""

    uuid: str = ""
    source_path: str = ""
    destination_path: str = ""
    destination_uuid: str = ""

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            uuid=_get(data, "uuid"),
            source_path=_get(data, "source", "path"),
            destination_path=_get(data, "destination", "path"),
            destination_uuid=_get(data, "destination", "uuid"),
        )

    @property
    def volume_name(self) -> str:
        # source path is <svm or aggregate>:<volume>
        parts = self.source_path.split(":")
        return parts[1] if len(parts) > 1 else parts[0]


@dataclass(frozen=True)
class CloudTarget:
    uuid: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict):
        return cls(uuid=_get(data, "uuid"), name=_get(data, "name"))


@dataclass(frozen=True)
class CloudTargetDetail:
    uuid: str = ""
    name: str = ""
    container: str = ""
    cluster_name: str = ""

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            uuid=_get(data, "uuid"),
            name=_get(data, "name"),
            container=_get(data, "container"),
            cluster_name=_get(data, "cluster", "name"),
        )


@dataclass(frozen=True)
class VolumeRecord:
    """A volume from the private cli volume endpoint."""

    name: str = ""
    uuid: str = ""
    server: str = ""

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            name=_get(data, "volume"),
            uuid=_get(data, "uuid"),
            server=_get(data, "vserver"),
        )


@dataclass(frozen=True)
class BuftreeMapping:
    """Maps a volume to its buftree in an object store."""

    object_store_name: str = ""
    buftree_uuid: str = ""
    vol_uuid: str = ""

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            object_store_name=_get(data, "object_store_name"),
            buftree_uuid=_get(data, "buftree_uuid"),
            vol_uuid=_get(data, "vol_uuid"),
        )


@dataclass(frozen=True)
class ReportRow:
    """One volume's cloud side size.

    uuid is always the cloud resident identifier: the relationship
    destination uuid for backups, the buftree uuid for tiering.
    """

    name: str
    uuid: str
    size: str
    server: str = ""
    bucket: str = ""
