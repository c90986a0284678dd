import functools
import logging

from flask import Response, make_response, request
from werkzeug.exceptions import ClientDisconnected

from .constants import BODY_READ_ERROR_MESSAGE
from .errors import BodyReadError, NotifyError
from .notifier import Notifier

logger = logging.getLogger(__name__)


def _is_committed(response: Response) -> bool:
    # O handler principal já "escreveu" algo: status próprio ou corpo
    return response.status_code != 200 or bool(response.get_data())


def report_error(response: Response, message: str) -> Response:
    """
    Reporta uma falha depois que o handler principal já produziu sua resposta.

    Se a resposta principal já tem status/corpo, ela não é desfeita: o status
    é mantido e a mensagem é anexada ao corpo, como numa segunda escrita na
    mesma resposta HTTP. Caso contrário a resposta vira um 500 com o detalhe.
    """
    if _is_committed(response):
        body = response.get_data(as_text=True)
        response.set_data(f"{body}\n{message}" if body else message)
        return response
    return Response(message, status=500, mimetype="text/plain")


def _read_body() -> bytes:
    try:
        return request.get_data()
    except (ClientDisconnected, OSError) as exc:
        raise BodyReadError(BODY_READ_ERROR_MESSAGE) from exc


def intercept(handler, notifier: Notifier):
    """
    Envolve um view do Flask: executa o handler, depois lê o corpo bruto da
    requisição e o entrega ao notifier. A ordem é fixa: resposta principal
    primeiro, notificação depois. Se o corpo não puder ser lido o notifier
    não é chamado.
    """

    @functools.wraps(handler)
    def wrapper(*args, **kwargs):
        response = make_response(handler(*args, **kwargs))
        try:
            body = _read_body()
            logger.debug(f"Corpo recebido em {request.path}: {len(body)} bytes")
            notifier.notify(body)
        except NotifyError as exc:
            logger.error(f"Falha ao notificar evento de watch: {exc}")
            return report_error(response, str(exc))
        return response

    return wrapper
