import json
import logging
import sys
import unittest

from support import make_settings

from retail_api.core.logging import JsonFormatter, build_handler


class JsonFormatterTest(unittest.TestCase):
    def _record(self, message, *args, exc_info=None, **extra):
        record = logging.LogRecord("retail_api.main", logging.INFO, __file__, 1, message, args, exc_info)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_request_fields_are_carried(self):
        record = self._record(
            "%s %s %s %.1fms", "POST", "/api/sales", 201, 3.2,
            method="POST", path="/api/sales", status_code=201, elapsed_ms=3.2,
        )

        payload = json.loads(JsonFormatter().format(record))

        self.assertEqual(payload["message"], "POST /api/sales 201 3.2ms")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["logger"], "retail_api.main")
        self.assertEqual(payload["path"], "/api/sales")
        self.assertEqual(payload["status_code"], 201)
        self.assertEqual(payload["elapsed_ms"], 3.2)

    def test_plain_records_have_no_request_fields(self):
        payload = json.loads(JsonFormatter().format(self._record("Schema ready")))

        self.assertNotIn("path", payload)
        self.assertNotIn("exc_info", payload)

    def test_traceback_is_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = self._record("Unhandled error", exc_info=sys.exc_info())

        payload = json.loads(JsonFormatter().format(record))

        self.assertIn("RuntimeError: boom", payload["exc_info"])

    def test_handler_follows_log_json_setting(self):
        json_handler = build_handler(make_settings(LOG_JSON=True))
        plain_handler = build_handler(make_settings(LOG_JSON=False))

        self.assertIsInstance(json_handler.formatter, JsonFormatter)
        self.assertNotIsInstance(plain_handler.formatter, JsonFormatter)


if __name__ == "__main__":
    unittest.main()
