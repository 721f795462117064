"""Exceptions raised while building a cloud usage report.

Every exception here is fatal to a run. Records that simply do not match
(a relationship uuid mismatch, a volume without a buftree mapping) are not
errors and never raise.
"""


class CloudUsageError(Exception):
    """Base class for all report errors.

    Attributes:
        message -- The custom error string to show with the exception

    """

    def __init__(self, message):
        """Initialize the class.

        :param message: The custom error string to show with the exception
        """
        self.message = message
        super().__init__(self.message)


class TransportError(CloudUsageError):
    """The request never got a response (connection, TLS or timeout)."""

    def __init__(self, url, reason):
        self.url = url
        super().__init__(f"request to {url} failed: {reason}")


class StatusError(CloudUsageError):
    """The server answered with a non-success status."""

    def __init__(self, url, status_code, reason=""):
        self.url = url
        self.status_code = status_code
        status = f"{status_code} {reason}".strip()
        super().__init__(status)


class DecodeError(CloudUsageError):
    """The response body was not the expected JSON record set."""

    def __init__(self, url, reason):
        self.url = url
        super().__init__(f"could not decode response from {url}: {reason}")


class SizeResolutionError(CloudUsageError):
    """The bucket size lookup failed."""

    def __init__(self, bucket, identifier, reason):
        self.bucket = bucket
        self.identifier = identifier
        super().__init__(f"could not get size of {bucket}/{identifier}: {reason}")


class UploadError(CloudUsageError):
    """The report could not be written to the bucket."""

    def __init__(self, bucket, object_name, reason):
        self.bucket = bucket
        self.object_name = object_name
        super().__init__(f"could not upload {object_name} to {bucket}: {reason}")


class StorageClientError(CloudUsageError):
    """The cloud storage client could not be created."""

    def __init__(self, reason):
        super().__init__(f"could not create the cloud storage client: {reason}")


class OutputError(CloudUsageError):
    """A report file could not be written."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"could not write {path}: {reason}")
