"""JSON schemas for the ONTAP record sets the reports read.

Only types are checked. ONTAP leaves out fields it has no value for, and
those decode as empty strings.
"""

_string = {"type": "string"}

_path_and_uuid = {
    "type": "object",
    "properties": {"path": _string, "uuid": _string},
}


def collection(record_schema):
    """Wrap a record schema in the ``{"records": [...]}`` envelope."""
    return {
        "type": "object",
        "properties": {
            "records": {"type": "array", "items": record_schema},
            "num_records": {"type": "integer"},
        },
    }


relationship = {
    "type": "object",
    "properties": {
        "uuid": _string,
        "source": _path_and_uuid,
        "destination": _path_and_uuid,
    },
}

relationships = collection(relationship)

target = {
    "type": "object",
    "properties": {
        "uuid": _string,
        "name": _string,
        "container": _string,
        "cluster": {"type": "object", "properties": {"name": _string}},
    },
}

targets = collection(target)

volumes = collection(
    {
        "type": "object",
        "properties": {"volume": _string, "uuid": _string, "vserver": _string},
    }
)

vol_btuuids = collection(
    {
        "type": "object",
        "properties": {
            "object_store_name": _string,
            "buftree_uuid": _string,
            "vol_uuid": _string,
        },
    }
)
