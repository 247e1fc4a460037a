import unittest
from datetime import datetime, timedelta, timezone

from pcloudapi.errors import DecodeError, FormatError
from pcloudapi.util.time import (
    ZERO_TIME,
    decode_time,
    encode_time,
    format_time,
    is_zero,
    normalize_dt,
    now_utc,
    parse_time,
)


class TestUtilTime(unittest.TestCase):
    def test_now_utc_is_tz_aware(self) -> None:
        dt = now_utc()
        self.assertIsNotNone(dt.tzinfo)
        self.assertEqual(dt.tzinfo, timezone.utc)

    def test_normalize_dt_rejects_naive(self) -> None:
        naive = datetime(2025, 1, 1, 12, 0, 0)
        with self.assertRaises(ValueError):
            normalize_dt(naive)

    def test_encode_time_sample(self) -> None:
        dt = datetime(2014, 3, 16, 17, 26, 4, tzinfo=timezone.utc)
        self.assertEqual(encode_time(dt), '"Sun, 16 Mar 2014 17:26:04 +0000"')

    def test_decode_time_sample(self) -> None:
        dt = decode_time('"Sun, 16 Mar 2014 17:26:04 +0000"')
        self.assertEqual(dt.tzinfo, timezone.utc)
        self.assertEqual(dt, datetime(2014, 3, 16, 17, 26, 4, tzinfo=timezone.utc))

    def test_encode_normalizes_to_utc(self) -> None:
        jst = timezone(timedelta(hours=9))
        dt = datetime(2025, 1, 1, 12, 34, 56, tzinfo=jst)
        # 12:34:56 JST == 03:34:56 UTC
        self.assertEqual(encode_time(dt), '"Wed, 01 Jan 2025 03:34:56 +0000"')

    def test_decode_offset_converts_to_utc(self) -> None:
        dt = decode_time('"Wed, 01 Jan 2025 12:34:56 +0900"')
        self.assertEqual(dt.tzinfo, timezone.utc)
        self.assertEqual(dt, datetime(2025, 1, 1, 3, 34, 56, tzinfo=timezone.utc))

        dt = decode_time('"Tue, 31 Dec 2024 20:00:00 -0130"')
        self.assertEqual(dt, datetime(2024, 12, 31, 21, 30, 0, tzinfo=timezone.utc))

    def test_round_trip_whole_seconds(self) -> None:
        samples = [
            datetime(2014, 3, 16, 17, 26, 4, tzinfo=timezone.utc),
            datetime(1999, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
            datetime(2024, 2, 29, 0, 0, 0, tzinfo=timezone.utc),
            datetime(2030, 7, 4, 8, 5, 9, tzinfo=timezone(timedelta(hours=-5))),
        ]
        for dt in samples:
            with self.subTest(dt=dt):
                self.assertEqual(decode_time(encode_time(dt)), dt)

    def test_sub_second_precision_is_dropped(self) -> None:
        dt = datetime(2025, 1, 1, 0, 0, 0, 999999, tzinfo=timezone.utc)
        self.assertEqual(decode_time(encode_time(dt)), dt.replace(microsecond=0))

    def test_zero_time_encodes_to_well_formed_token(self) -> None:
        token = encode_time(ZERO_TIME)
        self.assertEqual(token, '"Mon, 01 Jan 0001 00:00:00 +0000"')
        self.assertEqual(decode_time(token), ZERO_TIME)
        self.assertTrue(is_zero(decode_time(token)))

    def test_is_zero(self) -> None:
        self.assertTrue(is_zero(ZERO_TIME))
        self.assertFalse(is_zero(now_utc()))

    def test_weekday_is_not_checked_against_date(self) -> None:
        # 16 Mar 2014 was a Sunday.
        dt = parse_time("Mon, 16 Mar 2014 17:26:04 +0000")
        self.assertEqual(dt, datetime(2014, 3, 16, 17, 26, 4, tzinfo=timezone.utc))

    def test_decode_time_requires_quotes(self) -> None:
        with self.assertRaises(FormatError):
            decode_time("Sun, 16 Mar 2014 17:26:04 +0000")
        with self.assertRaises(FormatError):
            decode_time('"Sun, 16 Mar 2014 17:26:04 +0000')
        with self.assertRaises(FormatError):
            decode_time('"')

    def test_decode_time_rejects_malformed(self) -> None:
        bad = [
            '""',
            '"Sun, 6 Mar 2014 17:26:04 +0000"',
            '"Sun, 16 March 2014 17:26:04 +0000"',
            '"Sun, 16 Mar 14 17:26:04 +0000"',
            '"Sun, 16 Mar 2014 17:26 +0000"',
            '"Sun, 16 Mar 2014 17:26:04 GMT"',
            '"Sun, 16 Mar 2014 17:26:04 +0000 "',
            '"Xyz, 16 Mar 2014 17:26:04 +0000"',
            '"2014-03-16T17:26:04Z"',
            # Digits outside ASCII 0-9.
            '"Sun, ١٦ Mar 2014 17:26:04 +0000"',
            '"Sun, 16 Mar ２０１４ 17:26:04 +0000"',
            '"Sun, 16 Mar 2014 1٧:26:04 +0000"',
            '"Sun, 16 Mar 2014 17:26:04 +٠٠٠٠"',
        ]
        for token in bad:
            with self.subTest(token=token):
                with self.assertRaises(FormatError):
                    decode_time(token)

    def test_decode_time_rejects_impossible_dates(self) -> None:
        with self.assertRaises(FormatError):
            decode_time('"Fri, 30 Feb 2024 00:00:00 +0000"')
        with self.assertRaises(FormatError):
            decode_time('"Fri, 01 Mar 2024 25:00:00 +0000"')

    def test_format_error_is_decode_error(self) -> None:
        with self.assertRaises(DecodeError):
            parse_time(12345)  # type: ignore[arg-type]

    def test_format_time_has_no_quotes(self) -> None:
        dt = datetime(2014, 3, 16, 17, 26, 4, tzinfo=timezone.utc)
        self.assertEqual(format_time(dt), "Sun, 16 Mar 2014 17:26:04 +0000")


if __name__ == "__main__":
    unittest.main()
