import logging
from typing import Callable, Protocol, Sequence, runtime_checkable

from .checks import Check, parse_checks
from .formatters import render_slack_message
from .services import post_webhook

logger = logging.getLogger(__name__)


@runtime_checkable
class Notifier(Protocol):
    """Canal de notificação: recebe o corpo bruto do watch e o entrega."""

    def notify(self, data: bytes) -> None:
        """Levanta NotifyError (ou subclasse) em caso de falha."""
        ...


class SlackNotifier:
    """
    Envia os checks com falha para um Incoming Webhook do Slack.

    Fluxo por chamada: parse -> (lista vazia? encerra) -> render -> deliver.
    Nenhum estado é mantido entre chamadas.
    """

    def __init__(
        self,
        webhook_url: str,
        render: Callable[[Sequence[Check]], bytes] = render_slack_message,
        deliver: Callable[[bytes, str], object] = post_webhook,
    ):
        self.webhook_url = webhook_url
        self.render = render
        self.deliver = deliver

    def notify(self, data: bytes) -> None:
        checks = parse_checks(data)
        if not checks:
            logger.debug("Nenhum check com falha no evento, nada a notificar")
            return
        payload = self.render(checks)
        self.deliver(payload, self.webhook_url)
        logger.info(f"Notificação enviada ao Slack ({len(checks)} checks com falha)")
