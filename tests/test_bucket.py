"""Tests for single-request bucket operations."""

import httpx
import pytest

from conftest import raw_path
from gcs_tools.core.exceptions import (
    DecodeError,
    RemoteStatusError,
    ValidationError,
)
from gcs_tools.storage import Object


class TestCreateObject:
    """Test media uploads."""

    def test_create_object_success(self, client, fake_api, object_resource):
        """Test a successful upload issues one POST and returns the object."""
        fake_api.queue_json(object_resource)

        obj = client.bucket("test-bucket").create_object(
            "data/file.txt", b"hello world!", "text/plain"
        )

        assert len(fake_api.requests) == 1
        request = fake_api.requests[0]
        assert request.method == "POST"
        assert raw_path(request) == "/upload/storage/v1/b/test%2Dbucket/o"
        assert request.url.params["uploadType"] == "media"
        assert request.url.params["name"] == "data/file.txt"
        assert request.headers["authorization"] == "Bearer test-token"
        assert request.headers["content-type"] == "text/plain"
        assert request.headers["content-length"] == "12"
        assert request.content == b"hello world!"

        assert obj == Object(client, "test-bucket", "data/file.txt")
        assert obj.resource.size == 12
        assert obj.resource.content_type == "text/plain"

    def test_create_object_uses_returned_name(self, client, fake_api):
        """Test the object handle is named after the returned resource."""
        fake_api.queue_json({"name": "normalized.txt"})

        obj = client.bucket("b").create_object("raw.txt", b"", "text/plain")

        assert obj.name == "normalized.txt"
        assert obj.bucket == "b"

    def test_create_object_malformed_body(self, client, fake_api):
        """Test a response without a name is a decode error."""
        fake_api.queue_json({"bucket": "test-bucket"})

        with pytest.raises(DecodeError):
            client.bucket("test-bucket").create_object("x", b"1", "text/plain")

        assert len(fake_api.requests) == 1

    def test_create_object_rejected(self, client, fake_api):
        """Test a 403 surfaces status and body."""
        fake_api.queue(httpx.Response(403, text="forbidden"))

        with pytest.raises(RemoteStatusError) as exc_info:
            client.bucket("test-bucket").create_object("x", b"1", "text/plain")

        assert exc_info.value.status_code == 403
        assert "forbidden" in str(exc_info.value)


class TestGetObject:
    """Test object metadata lookups."""

    def test_object_success(self, client, fake_api, object_resource):
        """Test fetching one object issues exactly one GET."""
        fake_api.queue_json(object_resource)

        obj = client.bucket("test-bucket").object("data/file.txt")

        assert len(fake_api.requests) == 1
        request = fake_api.requests[0]
        assert request.method == "GET"
        assert raw_path(request) == "/storage/v1/b/test%2Dbucket/o/data%2Ffile%2Etxt"
        assert request.headers["authorization"] == "Bearer test-token"
        assert obj.name == "data/file.txt"
        assert obj.uri == "gs://test-bucket/data/file.txt"
        assert obj.resource.generation == "1700000000000000"

    def test_object_malformed_json(self, client, fake_api):
        """Test a non-JSON body is a decode error."""
        fake_api.queue(httpx.Response(200, text="{not json"))

        with pytest.raises(DecodeError):
            client.bucket("test-bucket").object("file.txt")

        assert len(fake_api.requests) == 1

    def test_object_not_found(self, client, fake_api):
        """Test a 404 surfaces as a remote status error."""
        fake_api.queue(httpx.Response(404, text="No such object"))

        with pytest.raises(RemoteStatusError) as exc_info:
            client.bucket("test-bucket").object("missing.txt")

        assert exc_info.value.status_code == 404
        assert exc_info.value.body == "No such object"

    def test_object_name_with_unicode(self, client, fake_api):
        """Test non-ASCII names are percent-encoded as UTF-8."""
        fake_api.queue_json({"name": "café"})

        client.bucket("b").object("café")

        assert raw_path(fake_api.requests[0]) == "/storage/v1/b/b/o/caf%C3%A9"


class TestDeleteBucket:
    """Test bucket deletion."""

    def test_delete_success(self, client, fake_api):
        """Test delete issues exactly one DELETE and accepts an empty body."""
        fake_api.queue(httpx.Response(204))

        result = client.bucket("old_bucket").delete()

        assert result is None
        assert len(fake_api.requests) == 1
        request = fake_api.requests[0]
        assert request.method == "DELETE"
        assert raw_path(request) == "/storage/v1/b/old%5Fbucket"
        assert request.headers["authorization"] == "Bearer test-token"

    def test_delete_with_json_body(self, client, fake_api):
        """Test a JSON body on success is accepted."""
        fake_api.queue_json({})

        client.bucket("b").delete()

    def test_delete_malformed_body(self, client, fake_api):
        """Test a non-JSON body is a decode error."""
        fake_api.queue(httpx.Response(200, text="definitely not json"))

        with pytest.raises(DecodeError):
            client.bucket("b").delete()

        assert len(fake_api.requests) == 1

    def test_delete_conflict(self, client, fake_api):
        """Test deleting a non-empty bucket surfaces the 409."""
        fake_api.queue(httpx.Response(409, text="bucket not empty"))

        with pytest.raises(RemoteStatusError) as exc_info:
            client.bucket("b").delete()

        assert exc_info.value.status_code == 409


class TestClient:
    """Test client helpers."""

    def test_bucket_requires_name(self, client):
        """Test an empty bucket name is rejected."""
        with pytest.raises(ValidationError, match="must not be empty"):
            client.bucket("")

    def test_bucket_handle(self, client, fake_api):
        """Test bucket handles make no request."""
        bucket = client.bucket("test-bucket")

        assert bucket.name == "test-bucket"
        assert bucket.client is client
        assert fake_api.requests == []

    def test_buckets_share_token_manager(self, client):
        """Test all buckets go through the client's token manager."""
        first = client.bucket("a")
        second = client.bucket("b")

        assert first.client.token_manager is second.client.token_manager
