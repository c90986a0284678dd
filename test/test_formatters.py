#!/usr/bin/env python3
import json
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from consul_notify.checks import Check, parse_checks
from consul_notify.formatters import (
    CLOSING_TEXT,
    HEADER_TEXT,
    build_slack_message,
    render_slack_message,
)
from consul_notify.utils import escape_mrkdwn


def _texts(message):
    """Todos os textos (text + fields) dos blocos, na ordem."""
    out = []
    for block in message["blocks"]:
        if "text" in block:
            out.append(block["text"]["text"])
        for f in block.get("fields", []):
            out.append(f["text"])
    return out


class TestRenderSlackMessage(unittest.TestCase):
    def test_scenario_single_check(self):
        checks = parse_checks(
            b'[{"ServiceName":"web","Node":"h1","Name":"ping","CheckID":"c1","Output":"timeout"}]'
        )
        payload = render_slack_message(checks)
        self.assertIsInstance(payload, bytes)
        text = payload.decode("utf-8")
        self.assertIn("1 checks are failing", text)
        for value in ("web", "h1", "ping", "c1", "timeout"):
            self.assertIn(value, text)
        # payload é JSON válido
        json.loads(payload)

    def test_layout(self):
        message = build_slack_message([Check(service_name="web", node="h1", name="ping",
                                             check_id="c1", output="timeout")])
        blocks = message["blocks"]
        self.assertEqual(blocks[0]["text"]["text"], HEADER_TEXT)
        self.assertEqual(blocks[1], {"type": "divider"})
        self.assertIn("_1 checks are failing_", blocks[2]["text"]["text"])
        self.assertEqual(blocks[3]["text"]["text"], "*Service name:* _web_")
        self.assertEqual(
            [f["text"] for f in blocks[3]["fields"]],
            ["*Host Name*: h1", "*Check Name*: ping", "*Check ID*: c1", "*Check Output*: timeout"],
        )
        self.assertEqual(blocks[4], {"type": "divider"})
        self.assertEqual(blocks[-1], {"type": "section", "text": {"type": "plain_text", "text": CLOSING_TEXT}})
        self.assertEqual(len(blocks), 6)
        self.assertEqual(message["text"], "1 checks are failing")

    def test_count_and_order(self):
        checks = [Check(check_id=f"check-{i}", service_name=f"svc-{i}") for i in (3, 1, 2)]
        message = build_slack_message(checks)
        self.assertIn("3 checks are failing", message["blocks"][2]["text"]["text"])
        detail_ids = [t for t in _texts(message) if t.startswith("*Check ID*")]
        self.assertEqual(detail_ids, ["*Check ID*: check-3", "*Check ID*: check-1", "*Check ID*: check-2"])

    def test_special_characters_are_escaped(self):
        check = Check(service_name="a<b>", output='exit 2 & "oops" <@U123>\nline2')
        payload = render_slack_message([check])
        message = json.loads(payload)
        texts = _texts(message)
        self.assertIn("*Service name:* _a&lt;b&gt;_", texts)
        self.assertIn('*Check Output*: exit 2 &amp; "oops" &lt;@U123&gt;\nline2', texts)

    def test_non_ascii_kept_literal(self):
        payload = render_slack_message([Check(node="sérvidor-ç")])
        self.assertIn("sérvidor-ç".encode("utf-8"), payload)

    def test_long_output_is_kept_whole(self):
        output = "line of check output " * 200
        message = build_slack_message([Check(output=output)])
        output_field = message["blocks"][3]["fields"][3]["text"]
        self.assertEqual(output_field, "*Check Output*: " + output)
        self.assertIn(output, render_slack_message([Check(output=output)]).decode("utf-8"))


class TestTextHelpers(unittest.TestCase):
    def test_escape_mrkdwn(self):
        self.assertEqual(escape_mrkdwn("<a & b>"), "&lt;a &amp; b&gt;")
        self.assertEqual(escape_mrkdwn("&lt;"), "&amp;lt;")
        self.assertEqual(escape_mrkdwn(None), "")
        self.assertEqual(escape_mrkdwn("plain *bold*"), "plain *bold*")


if __name__ == '__main__':
    unittest.main()
