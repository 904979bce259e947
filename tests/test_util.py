import unittest
from datetime import datetime, timedelta, timezone

from b2presign import datetime_utils
from b2presign.util import encode_query, is_ip_address, uri_encode, url_host


class TestUriEncode(unittest.TestCase):
    def test_unreserved_kept(self):
        self.assertEqual(uri_encode("AZaz09-_.~"), "AZaz09-_.~")

    def test_reserved_escaped(self):
        self.assertEqual(uri_encode("a b+c/d=e&f"), "a%20b%2Bc%2Fd%3De%26f")
        self.assertEqual(uri_encode("a/b c", encode_slash=False), "a/b%20c")

    def test_utf8(self):
        self.assertEqual(uri_encode("ü"), "%C3%BC")

    def test_encode_query_keeps_order(self):
        self.assertEqual(encode_query([("z", "1"), ("a", "x/y")]), "z=1&a=x%2Fy")


class TestUrlHost(unittest.TestCase):
    def test_host(self):
        self.assertEqual(url_host("https://b.s3.example.com/k?x=1"), "b.s3.example.com")
        self.assertEqual(url_host("http://b.localhost:9000/k"), "b.localhost:9000")

    def test_no_host(self):
        self.assertIsNone(url_host("/just/a/path"))
        self.assertIsNone(url_host("https://b.example.com./k"))
        self.assertIsNone(url_host("http://b.localhost:notaport/k"))

    def test_host_lowercased(self):
        self.assertEqual(url_host("https://MyBucket.S3.example.com/k"), "mybucket.s3.example.com")
        self.assertEqual(url_host("http://B.Localhost:9000/k"), "b.localhost:9000")

    def test_ip_literal_is_not_a_domain(self):
        self.assertIsNone(url_host("https://10.0.0.1/k"))
        self.assertIsNone(url_host("https://[2001:db8::1]:443/k"))
        self.assertTrue(is_ip_address("10.0.0.1"))
        self.assertTrue(is_ip_address("[::1]"))
        self.assertFalse(is_ip_address("s3.us-west-002.backblazeb2.com"))


class TestDatetimeUtils(unittest.TestCase):
    def test_formats(self):
        ts = datetime(2015, 8, 30, 12, 36, 0, tzinfo=timezone.utc)
        self.assertEqual(datetime_utils.amz_date(ts), "20150830T123600Z")
        self.assertEqual(datetime_utils.date_stamp(ts), "20150830")

    def test_aware_timestamp_converted_to_utc(self):
        ts = datetime(2015, 8, 31, 1, 36, 0, tzinfo=timezone(timedelta(hours=13)))
        self.assertEqual(datetime_utils.amz_date(ts), "20150830T123600Z")

    def test_get_utc_datetime(self):
        now = datetime_utils.get_utc_datetime()
        self.assertEqual(now.utcoffset(), timedelta(0))
        self.assertEqual(datetime_utils.to_utc(None).tzinfo, timezone.utc)
