'''
cloud bucket helpers: sizes of backup and tiering objects, report uploads
'''
import logging
import pathlib

from google.api_core import exceptions as gcs_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import storage

from .errors import SizeResolutionError, StorageClientError, UploadError
from .size_utils import approximate_size

file_name = pathlib.Path(__file__).name


def build_location(bucket, identifier, scheme='gs'):
    return f"{scheme}://{bucket}/{identifier}"


class CloudStorage:
    """Google Cloud Storage access for the reports.

    Credentials come from the environment (GOOGLE_APPLICATION_CREDENTIALS or
    application default credentials).
    """

    def __init__(self, client=None, report_prefix='reports/'):
        if client is None:
            try:
                client = storage.Client()
            except (auth_exceptions.GoogleAuthError, gcs_exceptions.GoogleAPIError) as e:
                raise StorageClientError(e) from e
        self.client = client
        self.report_prefix = report_prefix

    def get_storage_size_bytes(self, bucket, identifier):
        """Total bytes of every object in the bucket under the identifier prefix."""
        try:
            blobs = self.client.list_blobs(bucket, prefix=identifier)
            total = sum(blob.size or 0 for blob in blobs)
        except (gcs_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError) as e:
            raise SizeResolutionError(bucket, identifier, e) from e
        logging.debug(f"{file_name} : {bucket}/{identifier} uses {total} bytes")
        return total

    def get_storage_size(self, bucket, identifier):
        """Human-readable size of the objects under the identifier prefix."""
        return approximate_size(self.get_storage_size_bytes(bucket, identifier))

    def upload_report(self, path, bucket):
        """Upload a local file to <report_prefix><file name>, never overwriting.

        Returns the object name.
        """
        path = pathlib.Path(path)
        object_name = f"{self.report_prefix}{path.name}"
        blob = self.client.bucket(bucket).blob(object_name)
        try:
            # generation 0 only matches an object that does not exist yet
            blob.upload_from_filename(str(path), if_generation_match=0)
        except gcs_exceptions.PreconditionFailed as e:
            raise UploadError(bucket, object_name, "object already exists") from e
        except (gcs_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError, OSError) as e:
            raise UploadError(bucket, object_name, e) from e
        logging.info(f"{file_name} : uploaded {path} to {build_location(bucket, object_name)}")
        return object_name

    def close(self):
        close = getattr(self.client, 'close', None)
        if close:
            close()
