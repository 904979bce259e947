import unittest

import requests
from flexmock import flexmock

from b2presign.exceptions import ResolutionError, TransportError
from b2presign.resolver import (
    B2_AUTHORIZE_URL,
    AuthorizeAccountRequest,
    endpoint_from_s3_api_url,
    region_from_s3_api_url,
    resolve_endpoint,
)

AUTH_BODY = {
    "accountId": "abc123",
    "apiUrl": "https://api002.backblazeb2.com",
    "authorizationToken": "4_002token",
    "downloadUrl": "https://f002.backblazeb2.com",
    "recommendedPartSize": 100000000,
    "absoluteMinimumPartSize": 5000000,
    "s3ApiUrl": "https://s3.us-west-002.backblazeb2.com",
}


def fake_response(body=None, status_error=None, json_error=None):
    def raise_for_status():
        if status_error is not None:
            raise status_error

    def json():
        if json_error is not None:
            raise json_error
        return body

    return flexmock(raise_for_status=raise_for_status, json=json)


class TestRegion(unittest.TestCase):
    def test_region_from_s3_api_url(self):
        self.assertEqual(region_from_s3_api_url("s3.us-east-005.backblazeb2.com"), "us-east-005")
        self.assertEqual(region_from_s3_api_url("s3.eu-central-003"), "eu-central-003")
        self.assertIsNone(region_from_s3_api_url("localhost"))
        self.assertIsNone(region_from_s3_api_url("s3."))

    def test_endpoint_from_s3_api_url(self):
        self.assertEqual(
            endpoint_from_s3_api_url("https://s3.us-west-002.backblazeb2.com"),
            ("s3.us-west-002.backblazeb2.com", "us-west-002"),
        )

    def test_endpoint_from_bad_url(self):
        for url in [
            "s3.us-west-002.backblazeb2.com",
            "https://",
            "https://localhost",
            None,
            42,
            "https://10.0.0.1",
            "https://[2001:db8::1]",
        ]:
            with self.assertRaises(ResolutionError):
                endpoint_from_s3_api_url(url)


class TestAuthorizeAccountRequest(unittest.TestCase):
    def test_run(self):
        flexmock(requests).should_receive("get").with_args(
            B2_AUTHORIZE_URL, auth=("key-id", "app-key"), timeout=5
        ).and_return(fake_response(AUTH_BODY)).once()
        authorization = AuthorizeAccountRequest("key-id", "app-key", timeout=5).run()
        self.assertEqual(authorization.endpoint_host, "s3.us-west-002.backblazeb2.com")
        self.assertEqual(authorization.region, "us-west-002")
        self.assertEqual(authorization.recommended_part_size, 100000000)
        self.assertEqual(authorization.absolute_minimum_part_size, 5000000)
        self.assertEqual(authorization.download_url, "https://f002.backblazeb2.com")

    def test_custom_adapter(self):
        req = AuthorizeAccountRequest("key-id", "app-key", url="https://b2.test/authorize")
        adapter = flexmock(get=lambda *a, **k: fake_response(AUTH_BODY))
        flexmock(req).should_receive("adapter").and_return(adapter)
        self.assertEqual(req.run().region, "us-west-002")

    def test_connection_error(self):
        flexmock(requests).should_receive("get").and_raise(requests.ConnectionError("refused"))
        with self.assertRaises(TransportError):
            AuthorizeAccountRequest("key-id", "app-key").run()

    def test_timeout(self):
        flexmock(requests).should_receive("get").and_raise(requests.Timeout("slow"))
        with self.assertRaises(TransportError):
            AuthorizeAccountRequest("key-id", "app-key", timeout=0.1).run()

    def test_http_error(self):
        error = requests.HTTPError("401 Client Error: Unauthorized")
        flexmock(requests).should_receive("get").and_return(fake_response(status_error=error))
        with self.assertRaises(TransportError):
            AuthorizeAccountRequest("key-id", "bad-key").run()

    def test_malformed_json(self):
        flexmock(requests).should_receive("get").and_return(
            fake_response(json_error=ValueError("Expecting value"))
        )
        with self.assertRaises(ResolutionError) as ctx:
            AuthorizeAccountRequest("key-id", "app-key").run()
        self.assertNotIsInstance(ctx.exception, TransportError)

    def test_missing_s3_api_url(self):
        for body in [{}, [], {"s3ApiUrl": ""}]:
            req = AuthorizeAccountRequest("key-id", "app-key")
            adapter = flexmock(get=lambda *a, **k: fake_response(body))
            flexmock(req).should_receive("adapter").and_return(adapter)
            with self.assertRaises(ResolutionError):
                req.run()

    def test_resolve_endpoint(self):
        flexmock(requests).should_receive("get").and_return(fake_response(AUTH_BODY))
        self.assertEqual(
            resolve_endpoint("key-id", "app-key"),
            ("s3.us-west-002.backblazeb2.com", "us-west-002"),
        )
