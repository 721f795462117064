"""Turn matched records into report rows."""

import logging
import pathlib

from .records import ReportRow

file_name = pathlib.Path(__file__).name


def build_row(container, name, uuid, size_resolver, server=""):
    """Look up the size of one cloud object and build its row.

    :param container: the bucket holding the object, used as the row's bucket
    :param name: the volume name
    :param uuid: the cloud side identifier
    :param size_resolver: callable(container, uuid) returning a size string
    :param server: the svm owning the volume (tiering only)
    """
    size = size_resolver(container, uuid)
    logging.debug(f"{file_name} : {name} ({uuid}) uses {size}")
    return ReportRow(name=name, uuid=uuid, size=size, server=server, bucket=container)
