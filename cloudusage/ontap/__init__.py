"""ONTAP REST client for the endpoints the cloud usage reports read."""

import base64
import logging
import pathlib

import urllib3

from ..records import (
    BuftreeMapping,
    CloudTarget,
    CloudTargetDetail,
    RelationshipDetail,
    RelationshipSummary,
    VolumeRecord,
)
from ..restapi import APIWrapper
from . import schemas

file_name = pathlib.Path(__file__).name

# cluster management certificates are usually self signed
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class ONTAPAPIClient(APIWrapper):
    def __init__(self, cluster, config, **kwargs):
        self.cluster = cluster
        self.config = config

        user, enc = self.config.get_user("clusters", cluster)
        b64string = base64.b64encode(f"{user}:{enc}".encode("ascii"))
        auth_header = {"authorization": f"Basic {b64string.decode()}"}

        super().__init__(
            base_url=f"https://{cluster}",
            auth_header=auth_header,
            base_api_path=self.config.get_setting("ontapapi", "general", "base_api_path", "/api"),
            timeout=self.config.get_setting("ontapapi", "general", "timeout", 10),
            **kwargs,
        )

    def _records(self, path_template, schema, query_params=None):
        body = self.fetch(path_template, schema, query_params=query_params)
        records = body.get("records", [])
        logging.debug(f"{file_name} : {path_template} returned {len(records)} records")
        return records

    def get_relationships(self):
        records = self._records("/snapmirror/relationships/", schemas.relationships)
        return [RelationshipSummary.from_dict(item) for item in records]

    def get_relationship(self, uuid):
        body = self.fetch(
            "/snapmirror/relationships/{uuid}",
            schemas.relationship,
            path_params={"uuid": uuid},
        )
        return RelationshipDetail.from_dict(body)

    def get_targets(self):
        records = self._records("/cloud/targets/", schemas.targets)
        return [CloudTarget.from_dict(item) for item in records]

    def get_target(self, uuid):
        body = self.fetch(
            "/cloud/targets/{uuid}", schemas.target, path_params={"uuid": uuid}
        )
        return CloudTargetDetail.from_dict(body)

    def get_volumes(self):
        records = self._records(
            "/private/cli/volume/",
            schemas.volumes,
            query_params={"fields": "uuid,volume"},
        )
        return [VolumeRecord.from_dict(item) for item in records]

    def get_vol_btuuids(self):
        records = self._records(
            "/private/cli/storage/aggregate/object-store/vol-btuuids",
            schemas.vol_btuuids,
            query_params={"fields": "buftree_uuid,vol_uuid"},
        )
        return [BuftreeMapping.from_dict(item) for item in records]
