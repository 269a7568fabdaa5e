"""Handle for a single object stored in a bucket."""

from typing import TYPE_CHECKING, Optional

from .resources import ObjectResource

if TYPE_CHECKING:
    from .client import Client


class Object:
    """An object in a Cloud Storage bucket."""

    def __init__(
        self,
        client: "Client",
        bucket: str,
        name: str,
        resource: Optional[ObjectResource] = None,
    ):
        self.client = client
        self._bucket = bucket
        self._name = name
        self.resource = resource

    @property
    def bucket(self) -> str:
        """Name of the bucket holding this object."""
        return self._bucket

    @property
    def name(self) -> str:
        return self._name

    @property
    def uri(self) -> str:
        """The object's ``gs://bucket/name`` URI."""
        return f"gs://{self._bucket}/{self._name}"

    def __repr__(self) -> str:
        return f"Object(bucket={self._bucket!r}, name={self._name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return (self._bucket, self._name) == (other._bucket, other._name)

    def __hash__(self) -> int:
        return hash((self._bucket, self._name))
