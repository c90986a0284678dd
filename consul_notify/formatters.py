import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from .checks import Check
from .errors import RenderError
from .utils import escape_mrkdwn

logger = logging.getLogger(__name__)

HEADER_TEXT = "*Consul service(s) check(s) are failing!* :disappointed:"
CLOSING_TEXT = "May the force be with you!"


def summary_line(count: int) -> str:
    return f"{count} checks are failing"


def _mrkdwn(text: str) -> Dict[str, str]:
    return {"type": "mrkdwn", "text": text}


def _section(text: Dict[str, str], fields: Optional[List[Dict[str, str]]] = None) -> Dict[str, Any]:
    block: Dict[str, Any] = {"type": "section", "text": text}
    if fields:
        block["fields"] = fields
    return block


def _divider() -> Dict[str, str]:
    return {"type": "divider"}


def build_check_block(check: Check) -> Dict[str, Any]:
    return _section(
        _mrkdwn(f"*Service name:* _{escape_mrkdwn(check.service_name)}_"),
        [
            _mrkdwn(f"*Host Name*: {escape_mrkdwn(check.node)}"),
            _mrkdwn(f"*Check Name*: {escape_mrkdwn(check.name)}"),
            _mrkdwn(f"*Check ID*: {escape_mrkdwn(check.check_id)}"),
            _mrkdwn(f"*Check Output*: {escape_mrkdwn(check.output)}"),
        ],
    )


def build_slack_message(checks: Sequence[Check]) -> Dict[str, Any]:
    """
    Monta a mensagem Block Kit: cabeçalho fixo, linha de resumo com a
    contagem, um bloco por check (na ordem recebida) e o fechamento fixo.
    """
    blocks: List[Dict[str, Any]] = [
        _section(_mrkdwn(HEADER_TEXT)),
        _divider(),
        _section(_mrkdwn(f"*Summary:* _{summary_line(len(checks))}_. Check below for more info.")),
    ]
    for check in checks:
        blocks.append(build_check_block(check))
        blocks.append(_divider())
    blocks.append(_section({"type": "plain_text", "text": CLOSING_TEXT}))

    # 'text' é o fallback usado nas notificações push do Slack
    return {"text": summary_line(len(checks)), "blocks": blocks}


def render_slack_message(checks: Sequence[Check]) -> bytes:
    try:
        message = build_slack_message(checks)
        payload = json.dumps(message, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise RenderError(str(exc)) from exc
    logger.debug(f"Mensagem Slack renderizada: {len(checks)} bloco(s) de check, {len(payload)} bytes")
    return payload
