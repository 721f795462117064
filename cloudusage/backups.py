"""
Cloud backup usage.

Snapmirror relationships to a cloud backup have a destination path of
<container>:<volume path>, and the container of a Cloud Backup setup always
starts with netapp-backup. The container has to be found before any
relationship can be matched to it, so this is done in two passes: find the
container, then fetch the detail of every relationship that lands in it.
"""

import logging
import pathlib
from typing import Iterable, List, Optional, Tuple

from .records import RelationshipSummary, ReportRow
from .report import build_row

file_name = pathlib.Path(__file__).name

BACKUP_CONTAINER_PREFIX = "netapp-backup"


def infer_container(relationships: Iterable[RelationshipSummary]) -> Optional[str]:
    """Return the container of the first relationship backed up to the cloud."""
    for relationship in relationships:
        if relationship.destination_path.startswith(BACKUP_CONTAINER_PREFIX):
            return relationship.destination_path.split(":")[0]
    return None


def resolve_relationship(client, container, summary, size_resolver) -> Optional[ReportRow]:
    """Build the row for one relationship.

    Returns None when the api hands back a different relationship than the
    one asked for. Fetch and size errors are raised.
    """
    detail = client.get_relationship(summary.uuid)
    if detail.uuid != summary.uuid:
        logging.debug(
            f"{file_name} : asked for relationship {summary.uuid}, got {detail.uuid}, skipping"
        )
        return None

    return build_row(container, detail.volume_name, detail.destination_uuid, size_resolver)


def map_volumes_to_backup(client, container, relationships, size_resolver) -> List[ReportRow]:
    rows = []
    for summary in relationships:
        if not summary.destination_path.startswith(container):
            continue
        row = resolve_relationship(client, container, summary, size_resolver)
        if row:
            rows.append(row)
    return rows


def get_backup_size(client, size_resolver) -> Tuple[str, List[ReportRow]]:
    """Return the backup container and a row for every backed up volume."""
    relationships = client.get_relationships()
    logging.debug(f"{file_name} : found {len(relationships)} snapmirror relationships")

    container = infer_container(relationships)
    if not container:
        logging.warning(
            f"{file_name} : no relationship with a {BACKUP_CONTAINER_PREFIX} destination found"
        )
        return "", []

    logging.info(f"{file_name} : backup container is {container}")
    rows = map_volumes_to_backup(client, container, relationships, size_resolver)
    logging.info(f"{file_name} : {len(rows)} backed up volumes")
    return container, rows
