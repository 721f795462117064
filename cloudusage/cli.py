"""
Report the cloud storage used by a cluster's Cloud Backup or Cloud Tiering
volumes.

    cloud-usage -cl cluster1.example.com -s tiering -e local
"""
import logging
import pathlib
import sys

from .backups import get_backup_size
from .cloud_utils import CloudStorage
from .config import Config
from .errors import CloudUsageError
from .log import setup_logger
from .ontap import ONTAPAPIClient
from .output import create_csv, print_table
from .parseargs import argp
from .progress import ProgressDots
from .tiering import get_tiering_size
from .workbook import create_workbook

script_name = "cloud_usage"

SERVICES = {
    'backup': get_backup_size,
    'tiering': get_tiering_size,
}


class AppClass:
    def __init__(self, cluster, service, export, config, client=None, storage=None, workbook=False):
        self.cluster = cluster
        self.service = service
        self.export = export
        self.config = config
        self.workbook = workbook
        self.client = client or ONTAPAPIClient(cluster, config)
        self.storage = storage or CloudStorage(
            report_prefix=config.get_setting('cloud', 'report_prefix', 'reports/'))
        self.scheme = config.get_setting('cloud', 'scheme', 'gs')
        self.bucket = ''
        self.rows = []

    def gather_data(self):
        logging.info(f"Gathering {self.service} data for {self.cluster}")
        gather = SERVICES[self.service]
        self.bucket, self.rows = gather(self.client, self.storage.get_storage_size)

    def output_data(self):
        if self.export == 'none':
            print_table(self.service, self.rows)
            return None

        filename = create_csv(self.service, self.rows, self.config.output_dir, self.scheme)
        if self.workbook:
            create_workbook(self.service, self.rows, filename, self.scheme)
        if self.export == 'cloud':
            if not self.bucket:
                raise CloudUsageError(f"no {self.service} bucket found to upload {filename.name} to")
            self.storage.upload_report(filename, self.bucket)
        return filename

    def go(self):
        try:
            if self.export == 'none':
                with ProgressDots(self.service):
                    self.gather_data()
            else:
                self.gather_data()
            return self.output_data()
        finally:
            self.storage.close()


def main(argv=None):
    setup_logger(script_name)
    args = argp(script_name=script_name, description="report cloud backup and tiering storage usage", parse=False)
    args.parse(argv)
    config = Config(args.config_dir, args.output_dir, args=args)  # pyright: ignore[reportAttributeAccessIssue]

    try:
        app = AppClass(args.cluster, args.service, args.export, config,  # pyright: ignore[reportAttributeAccessIssue]
                       workbook=args.workbook)  # pyright: ignore[reportAttributeAccessIssue]
        app.go()
    except CloudUsageError as e:
        logging.error(f"{pathlib.Path(__file__).name} : {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
