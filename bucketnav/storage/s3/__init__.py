"""
S3 Storage

boto3-backed storage for AWS S3 and S3-compatible services.
"""

from bucketnav.storage.s3.backend import S3Storage, create_s3_client

__all__ = ["S3Storage", "create_s3_client"]
