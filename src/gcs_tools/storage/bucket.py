"""Bucket-level storage operations: object create/fetch, bucket delete, listing."""

from typing import TYPE_CHECKING

from gcs_tools.core import get_logger
from gcs_tools.core.exceptions import DecodeError

from .object import Object
from .paths import encode_path_segment
from .resources import ObjectFolderList, ObjectResource

if TYPE_CHECKING:
    from .client import Client

logger = get_logger(__name__)

LIST_DELIMITER = "/"
LIST_PAGE_SIZE = 999
LIST_FIELDS = "items/name,prefixes,nextPageToken"


class Bucket:
    """A Cloud Storage bucket."""

    def __init__(self, client: "Client", name: str):
        self.client = client
        self._name = name

    @property
    def name(self) -> str:
        """Get the bucket's name."""
        return self._name

    def __repr__(self) -> str:
        return f"Bucket(name={self._name!r})"

    def create_object(self, name: str, data: bytes, mime_type: str) -> Object:
        """Insert a new object into the bucket with a single media upload.

        Args:
            name: Object name
            data: Object content
            mime_type: Value for the ``content-type`` header

        Returns:
            Handle on the stored object

        Raises:
            AuthorizationError: If no token could be obtained
            TransportError: If the request could not be completed
            RemoteStatusError: If the API rejects the upload
            DecodeError: If the response is not an object resource
        """
        logger.info("Creating object", bucket=self._name, object=name, size=len(data))

        url = self.client.upload_url("b", encode_path_segment(self._name), "o")
        token = self.client.token_manager.token()
        response = self.client.request(
            "create_object",
            "POST",
            url,
            authorization=token,
            params=[("uploadType", "media"), ("name", name)],
            headers={
                "content-type": mime_type,
                "content-length": str(len(data)),
            },
            content=data,
        )
        resource = self.client.decode(response, ObjectResource)

        logger.info("Object created", bucket=self._name, object=resource.name)
        return Object(self.client, self._name, resource.name, resource)

    def object(self, name: str) -> Object:
        """Get an object stored in the bucket.

        Raises:
            AuthorizationError: If no token could be obtained
            TransportError: If the request could not be completed
            RemoteStatusError: If the object does not exist or access is denied
            DecodeError: If the response is not an object resource
        """
        logger.debug("Fetching object", bucket=self._name, object=name)

        url = self.client.api_url(
            "b", encode_path_segment(self._name), "o", encode_path_segment(name)
        )
        token = self.client.token_manager.token()
        response = self.client.request("get_object", "GET", url, authorization=token)
        resource = self.client.decode(response, ObjectResource)

        return Object(self.client, self._name, resource.name, resource)

    def delete(self) -> None:
        """Delete the bucket.

        The API answers with an empty body; anything else must at least be JSON.

        Raises:
            AuthorizationError: If no token could be obtained
            TransportError: If the request could not be completed
            RemoteStatusError: If the bucket could not be deleted
            DecodeError: If a non-empty body is not JSON
        """
        logger.info("Deleting bucket", bucket=self._name)

        url = self.client.api_url("b", encode_path_segment(self._name))
        token = self.client.token_manager.token()
        response = self.client.request(
            "delete_bucket", "DELETE", url, authorization=token
        )

        if response.content.strip():
            try:
                response.json()
            except ValueError as e:
                raise DecodeError(f"Delete response body is not JSON: {e}") from e

        logger.info("Bucket deleted", bucket=self._name)

    def list_files(self, prefix: str = "") -> list[str]:
        """List all files and sub-folders directly within a folder.

        Pages are fetched one after another until the API stops returning a
        ``nextPageToken``. Each page contributes its object names first, then
        its sub-folder prefixes with the trailing delimiter removed. Names are
        not de-duplicated.

        There is no limit on the number of pages: a server that keeps returning
        a page token keeps this loop going.

        Args:
            prefix: Only list names starting with this prefix ("" for all)

        Returns:
            Object names and folder names in the order the API returned them

        Raises:
            AuthorizationError: If no token could be obtained
            TransportError: If any page request could not be completed
            RemoteStatusError: If any page request fails; nothing is returned
            DecodeError: If any page is not a valid listing
        """
        logger.info("Listing files", bucket=self._name, prefix=prefix)

        url = self.client.api_url("b", encode_path_segment(self._name), "o")
        token = self.client.token_manager.token()

        files: list[str] = []
        page_token = ""
        pages = 0

        while True:
            response = self.client.request(
                "list_objects",
                "GET",
                url,
                authorization=token,
                params=[
                    ("delimiter", LIST_DELIMITER),
                    ("maxResults", str(LIST_PAGE_SIZE)),
                    ("fields", LIST_FIELDS),
                    ("prefix", prefix),
                    ("pageToken", page_token),
                ],
            )
            page = self.client.decode(response, ObjectFolderList)
            pages += 1

            if page.items:
                files.extend(item.name for item in page.items)

            if page.prefixes:
                files.extend(p.removesuffix(LIST_DELIMITER) for p in page.prefixes)

            if page.next_page_token is None:
                break
            page_token = page.next_page_token

        logger.info(
            "Files listed",
            bucket=self._name,
            prefix=prefix,
            page_count=pages,
            file_count=len(files),
        )
        return files
