import io
import json
import unittest
from contextlib import redirect_stderr

from eitherpy import ConsoleLogger, NotAnEither, instrument, right, left, and_then


def halve(n):
    return right(n // 2) if n % 2 == 0 else left(f"{n} is odd")


class TestConsoleLogger(unittest.TestCase):
    def test_text_output_with_bound_fields(self):
        buf = io.StringIO()
        logger = ConsoleLogger("t").bind(step="parse")
        with redirect_stderr(buf):
            logger.info("hello", n=1)
        line = buf.getvalue().strip()
        self.assertIn("t INFO: hello", line)
        self.assertIn(" n=1", line)
        self.assertIn(" step=parse", line)

    def test_json_output(self):
        buf = io.StringIO()
        logger = ConsoleLogger("j", json_output=True)
        with redirect_stderr(buf):
            logger.error("bad", code=3)
        rec = json.loads(buf.getvalue())
        self.assertEqual(rec["level"], "ERROR")
        self.assertEqual(rec["msg"], "bad")
        self.assertEqual(rec["fields"], {"code": 3})

    def test_level_filtering(self):
        buf = io.StringIO()
        logger = ConsoleLogger(level="warn")
        with redirect_stderr(buf):
            logger.info("skip")
            logger.debug("skip")
            logger.warn("keep")
        self.assertEqual(len(buf.getvalue().strip().splitlines()), 1)
        logger.set_level("DEBUG")
        self.assertEqual(logger.level_name, "DEBUG")
        self.assertEqual(logger.bind(a=1).level_name, "DEBUG")


class TestInstrument(unittest.TestCase):
    def _records(self, buf):
        return [json.loads(l) for l in buf.getvalue().strip().splitlines()]

    def test_logs_right_and_left(self):
        buf = io.StringIO()
        logger = ConsoleLogger(level="DEBUG", json_output=True)
        step = instrument("halve", halve, logger=logger, tags={"component": "t"})
        with redirect_stderr(buf):
            ok = step(4)
            bad = step(3)
        self.assertEqual(ok, right(2))
        self.assertEqual(bad, left("3 is odd"))
        recs = self._records(buf)
        self.assertEqual([r["msg"] for r in recs], ["start halve", "right halve", "start halve", "left halve: 3 is odd"])
        self.assertEqual(recs[-1]["level"], "ERROR")
        self.assertEqual(recs[0]["fields"], {"component": "t"})

    def test_lift_captures_raise(self):
        buf = io.StringIO()
        step = instrument("int", int, logger=ConsoleLogger(json_output=True), lift=True)
        with redirect_stderr(buf):
            good = and_then(step, right("12"))
            bad = and_then(step, right("x"))
        self.assertEqual(good, right(12))
        self.assertTrue(isinstance(bad.error, ValueError))
        self.assertEqual([r["level"] for r in self._records(buf)], ["INFO", "ERROR"])

    def test_die_is_logged_and_reraised(self):
        def boom(_):
            raise RuntimeError("kaput")
        buf = io.StringIO()
        step = instrument("boom", boom, logger=ConsoleLogger(json_output=True))
        with redirect_stderr(buf):
            with self.assertRaises(RuntimeError):
                step(1)
        self.assertEqual(self._records(buf)[-1]["msg"], "die boom: kaput")

    def test_non_either_step_result(self):
        buf = io.StringIO()
        step = instrument("plain", lambda a: a, logger=ConsoleLogger(json_output=True))
        with redirect_stderr(buf):
            with self.assertRaises(NotAnEither):
                step(1)
