"""Cloud Storage client, bucket and object handles."""

from .bucket import Bucket
from .client import Client, ClientConfig
from .object import Object
from .paths import encode_path_segment, parse_gcs_path
from .resources import ObjectFolderList, ObjectName, ObjectResource

__all__ = [
    "Bucket",
    "Client",
    "ClientConfig",
    "Object",
    "ObjectFolderList",
    "ObjectName",
    "ObjectResource",
    "encode_path_segment",
    "parse_gcs_path",
]
