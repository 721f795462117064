"""Report the cloud storage used by ONTAP cloud backups and tiering."""

__version__ = "0.1.0"
