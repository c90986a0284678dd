import logging
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Tuple

import requests
import urllib3

from .constants import WEBHOOK_CONTENT_TYPE, WEBHOOK_TIMEOUT_SECONDS, WEBHOOK_VERIFY_TLS
from .errors import DeliveryError

logger = logging.getLogger(__name__)

# Suprime avisos de HTTPS inseguro quando a verificação TLS está desativada
if not WEBHOOK_VERIFY_TLS:
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    logger.debug("InsecureRequestWarning desabilitado (WEBHOOK_VERIFY_TLS=false)")


def _timeout_error(timeout: float) -> DeliveryError:
    return DeliveryError(f"http: request to webhook timed out after {timeout}s")


def _send(payload: bytes, url: str, timeout: float, verify_tls: bool,
          deadline: float) -> Tuple[requests.Response, bytes]:
    resp = requests.post(
        url,
        data=payload,
        headers={"Content-Type": WEBHOOK_CONTENT_TYPE},
        timeout=timeout,
        verify=verify_tls,
        stream=True,
    )
    try:
        chunks = []
        for chunk in resp.iter_content(chunk_size=1024):
            # Resposta lenta não pode segurar a thread além do prazo
            if time.monotonic() > deadline:
                raise _timeout_error(timeout)
            chunks.append(chunk)
        return resp, b"".join(chunks)
    finally:
        resp.close()


def post_webhook(payload: bytes, url: str, timeout: float = WEBHOOK_TIMEOUT_SECONDS,
                 verify_tls: bool = WEBHOOK_VERIFY_TLS) -> requests.Response:
    """
    Envia o payload renderizado para o webhook de destino numa única tentativa.
    O timeout cobre o ciclo inteiro (DNS, conexão, envio e leitura da resposta).
    Só HTTP 200 é sucesso; qualquer outro status ou erro de transporte
    vira DeliveryError.
    """
    deadline = time.monotonic() + timeout
    # Executor por chamada: requisições concorrentes não disputam workers
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        future = executor.submit(_send, payload, url, timeout, verify_tls, deadline)
        resp, body = future.result(timeout=timeout)
    except FutureTimeoutError as exc:
        logger.warning(f"Webhook não respondeu em {timeout}s")
        raise _timeout_error(timeout) from exc
    except requests.RequestException as exc:
        raise DeliveryError(f"http: request to webhook failed: {exc}") from exc
    finally:
        executor.shutdown(wait=False)

    if resp.status_code != 200:
        logger.warning(f"Webhook respondeu {resp.status_code}: {body[:200]!r}")
        raise DeliveryError(
            f"http: the request was not successful. Http response code: {resp.status_code}",
            status_code=resp.status_code,
        )
    return resp
