"""
Cloud tiering usage.

The tiering target is the cloud target named StorageAccount. Its detail holds
the container and the cluster name, and the target name doubles as the object
store name in the buftree mappings. Data volumes live on svm_<cluster name>,
the svm_ volumes are the svm root volumes and are left out.
"""

import logging
import pathlib
from typing import Iterable, List, Optional, Tuple

from .records import BuftreeMapping, CloudTarget, CloudTargetDetail, ReportRow, VolumeRecord
from .report import build_row

file_name = pathlib.Path(__file__).name

TIERING_TARGET_NAME = "StorageAccount"
SVM_PREFIX = "svm_"


def find_target(targets: Iterable[CloudTarget]) -> Optional[CloudTarget]:
    # with more than one StorageAccount target the first one wins
    for target in targets:
        if target.name == TIERING_TARGET_NAME:
            return target
    return None


def get_target(client) -> Tuple[CloudTargetDetail, str]:
    """Return the tiering target detail and the object store name.

    Without a StorageAccount target everything comes back empty.
    """
    target = find_target(client.get_targets())
    if not target:
        logging.warning(f"{file_name} : no cloud target named {TIERING_TARGET_NAME}")
        return CloudTargetDetail(), ""

    detail = client.get_target(target.uuid)
    logging.info(
        f"{file_name} : target {target.name} container {detail.container} cluster {detail.cluster_name}"
    )
    return detail, target.name


def filter_volumes(volumes: Iterable[VolumeRecord], cluster_name: str) -> List[VolumeRecord]:
    if not cluster_name:
        return []
    server = f"{SVM_PREFIX}{cluster_name}"
    return [
        volume
        for volume in volumes
        if volume.server == server and not volume.name.startswith(SVM_PREFIX)
    ]


def filter_mappings(mappings: Iterable[BuftreeMapping], object_store_name: str) -> List[BuftreeMapping]:
    if not object_store_name:
        return []
    return [mapping for mapping in mappings if mapping.object_store_name == object_store_name]


def join_volumes(volumes, mappings) -> List[Tuple[VolumeRecord, BuftreeMapping]]:
    """Inner join on volume uuid, a volume in two mappings gives two pairs."""
    return [
        (volume, mapping)
        for volume in volumes
        for mapping in mappings
        if volume.uuid == mapping.vol_uuid
    ]


def map_volumes_to_tiering(container, volumes, mappings, size_resolver) -> List[ReportRow]:
    return [
        build_row(container, volume.name, mapping.buftree_uuid, size_resolver, server=volume.server)
        for volume, mapping in join_volumes(volumes, mappings)
    ]


def get_tiering_size(client, size_resolver) -> Tuple[str, List[ReportRow]]:
    """Return the tiering container and a row for every tiered volume."""
    detail, object_store_name = get_target(client)

    volumes = filter_volumes(client.get_volumes(), detail.cluster_name)
    logging.debug(f"{file_name} : {len(volumes)} volumes on {SVM_PREFIX}{detail.cluster_name}")

    mappings = filter_mappings(client.get_vol_btuuids(), object_store_name)
    logging.debug(f"{file_name} : {len(mappings)} buftrees in {object_store_name!r}")

    rows = map_volumes_to_tiering(detail.container, volumes, mappings, size_resolver)
    logging.info(f"{file_name} : {len(rows)} tiered volumes")
    return detail.container, rows
