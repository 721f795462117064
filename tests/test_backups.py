"""Tests for the cloud backup correlation."""
import pytest
import responses

from cloudusage.backups import get_backup_size, infer_container, map_volumes_to_backup
from cloudusage.errors import SizeResolutionError, StatusError
from cloudusage.records import RelationshipDetail, RelationshipSummary, ReportRow

from .conftest import BASE_URL, SizeStub

RELATIONSHIPS_URL = f"{BASE_URL}/snapmirror/relationships/"


def summary(uuid, path, dest_uuid=""):
    return {"uuid": uuid, "destination": {"path": path, "uuid": dest_uuid}}


def detail(uuid, source, path, dest_uuid):
    return {
        "uuid": uuid,
        "source": {"path": source},
        "destination": {"path": path, "uuid": dest_uuid},
    }


def add_relationships(*records):
    responses.add(responses.GET, RELATIONSHIPS_URL, json={"records": list(records), "num_records": len(records)})


def add_detail(uuid, body):
    responses.add(responses.GET, f"{RELATIONSHIPS_URL}{uuid}", json=body)


class TestInferContainer:
    def test_first_netapp_backup_destination_wins(self):
        relationships = [
            RelationshipSummary("r0", "svm_dr:vol0"),
            RelationshipSummary("r1", "netapp-backup-one:/objstore/vol1"),
            RelationshipSummary("r2", "netapp-backup-two:/objstore/vol2"),
        ]
        assert infer_container(relationships) == "netapp-backup-one"

    def test_text_before_first_colon(self):
        relationships = [RelationshipSummary("r1", "netapp-backup1:a:b")]
        assert infer_container(relationships) == "netapp-backup1"

    def test_no_backup_destination(self):
        relationships = [
            RelationshipSummary("r0", "svm_dr:vol0"),
            RelationshipSummary("r1", "backup-netapp:vol1"),
        ]
        assert infer_container(relationships) is None

    def test_empty(self):
        assert infer_container([]) is None

    def test_prefix_must_be_at_start(self):
        assert infer_container([RelationshipSummary("r1", "x-netapp-backup:vol")]) is None


def test_volume_name_is_second_segment():
    assert RelationshipDetail(source_path="aggr1:volA").volume_name == "volA"
    assert RelationshipDetail(source_path="volA").volume_name == "volA"


@responses.activate
def test_single_backed_up_volume(client, sizes):
    add_relationships(summary("r1", "netapp-backup1:volA", "d1"))
    add_detail("r1", detail("r1", "aggr1:volA", "netapp-backup1:volA", "d1"))

    container, rows = get_backup_size(client, sizes)

    assert container == "netapp-backup1"
    assert rows == [ReportRow(name="volA", uuid="d1", size="1.00 GiB", bucket="netapp-backup1")]
    assert sizes.calls == [("netapp-backup1", "d1")]


@responses.activate
def test_no_backup_container_gives_no_rows(client, sizes):
    add_relationships(summary("r1", "svm_dr:volA", "d1"), summary("r2", "other:volB", "d2"))

    container, rows = get_backup_size(client, sizes)

    assert container == ""
    assert rows == []
    assert sizes.calls == []
    # only the summary list was fetched
    assert len(responses.calls) == 1


@responses.activate
def test_uuid_mismatch_is_skipped(client, sizes):
    add_relationships(
        summary("r1", "netapp-backup1:volA", "d1"),
        summary("r2", "netapp-backup1:volB", "d2"),
    )
    add_detail("r1", detail("other", "aggr1:volA", "netapp-backup1:volA", "d1"))
    add_detail("r2", detail("r2", "aggr1:volB", "netapp-backup1:volB", "d2"))

    _, rows = get_backup_size(client, sizes)

    assert [row.name for row in rows] == ["volB"]
    assert sizes.calls == [("netapp-backup1", "d2")]


@responses.activate
def test_only_relationships_in_container_are_fetched(client, sizes):
    add_relationships(
        summary("r0", "svm_dr:vol0", "d0"),
        summary("r1", "netapp-backup1:volA", "d1"),
        summary("r2", "netapp-backup2:volB", "d2"),
    )
    add_detail("r1", detail("r1", "svm1:volA", "netapp-backup1:volA", "d1"))

    _, rows = get_backup_size(client, sizes)

    assert [row.uuid for row in rows] == ["d1"]
    assert [call.request.url for call in responses.calls] == [RELATIONSHIPS_URL, f"{RELATIONSHIPS_URL}r1"]


@responses.activate
def test_row_uuid_is_destination_uuid(client):
    add_relationships(summary("r1", "netapp-backup1:volA", "summary-dest"))
    add_detail("r1", detail("r1", "svm1:volA", "netapp-backup1:volA", "detail-dest"))
    stub = SizeStub({"detail-dest": "2.50 TiB"})

    _, rows = get_backup_size(client, stub)

    assert rows[0].uuid == "detail-dest"
    assert rows[0].size == "2.50 TiB"
    assert rows[0].server == ""


@responses.activate
def test_detail_fetch_failure_aborts(client, sizes):
    add_relationships(summary("r1", "netapp-backup1:volA", "d1"))
    responses.add(responses.GET, f"{RELATIONSHIPS_URL}r1", status=500)

    with pytest.raises(StatusError):
        get_backup_size(client, sizes)


@responses.activate
def test_size_failure_aborts(client):
    add_relationships(summary("r1", "netapp-backup1:volA", "d1"))
    add_detail("r1", detail("r1", "svm1:volA", "netapp-backup1:volA", "d1"))

    def failing(container, identifier):
        raise SizeResolutionError(container, identifier, "denied")

    with pytest.raises(SizeResolutionError):
        get_backup_size(client, failing)


@responses.activate
def test_two_runs_give_same_rows(client, sizes):
    add_relationships(
        summary("r1", "netapp-backup1:volA", "d1"),
        summary("r2", "netapp-backup1:volB", "d2"),
    )
    add_detail("r1", detail("r1", "svm1:volA", "netapp-backup1:volA", "d1"))
    add_detail("r2", detail("r2", "svm1:volB", "netapp-backup1:volB", "d2"))

    first = get_backup_size(client, sizes)
    second = get_backup_size(client, sizes)

    assert first == second
    assert len(first[1]) == 2


def test_map_volumes_uses_passed_container(sizes):
    class Client:
        def get_relationship(self, uuid):
            return RelationshipDetail(uuid, "svm1:vol", "bucket-x:vol", "dest")

    rows = map_volumes_to_backup(Client(), "bucket-x", [RelationshipSummary("r1", "bucket-x:vol")], sizes)

    assert rows == [ReportRow("vol", "dest", "1.00 GiB", "", "bucket-x")]
